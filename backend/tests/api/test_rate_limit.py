"""Tests for per-client rate limiting."""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app


@pytest.fixture
def limited_client(container):
    """API client allowing two requests per minute."""
    settings = container.settings.model_copy(
        update={"rate_limit_requests": 2, "rate_limit_window": "1m"}
    )
    return TestClient(create_app(settings))


class TestRateLimit:
    def test_requests_within_limit_pass(self, limited_client):
        for _ in range(2):
            assert limited_client.get("/health").status_code == 200

    def test_excess_request_rejected(self, limited_client):
        limited_client.get("/health")
        limited_client.get("/health")

        response = limited_client.get("/health")

        assert response.status_code == 429
        body = response.json()
        assert body["error"] == "RATE_LIMIT_EXCEEDED"
        assert body["message"] == "Too many requests. Please try again later."
        assert "limit" in body["details"]
        assert response.headers["Retry-After"] == "60"

    def test_limit_spans_routes(self, limited_client):
        """The default limit counts every route against the same client."""
        limited_client.get("/health")
        limited_client.get("/catalog")

        response = limited_client.post("/auth/login", json={"email": "a@example.com"})

        assert response.status_code == 429
        assert response.json()["error"] == "RATE_LIMIT_EXCEEDED"

    def test_fresh_app_has_fresh_counters(self, container, limited_client):
        for _ in range(3):
            limited_client.get("/health")

        settings = container.settings.model_copy(
            update={"rate_limit_requests": 2, "rate_limit_window": "1m"}
        )
        other = TestClient(create_app(settings))

        assert other.get("/health").status_code == 200

    def test_disabled_limiter_never_rejects(self, container):
        settings = container.settings.model_copy(
            update={"rate_limit_enabled": False, "rate_limit_requests": 1}
        )
        client = TestClient(create_app(settings))

        statuses = {client.get("/health").status_code for _ in range(5)}

        assert statuses == {200}
