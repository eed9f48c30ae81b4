"""Tests for exception-to-response mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.errors import register_exception_handlers, status_for
from modules.auth.exceptions import CodeNotFoundError, InvalidTokenError
from modules.catalog.exceptions import ProductNotFoundError
from modules.checkout.exceptions import EmptyCatalogueError, InventoryUpdateFailedError
from shared.exceptions import (
    StorefrontError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AvailabilityError,
    RateLimitError,
    ServiceUnavailableError,
    InternalError,
)


class TestStatusFor:
    @pytest.mark.parametrize(
        "error,expected",
        [
            (CodeNotFoundError(), 400),
            (InvalidTokenError(), 401),
            (AuthenticationError("x"), 401),
            (ValidationError("x"), 400),
            (AvailabilityError("x"), 400),
            (NotFoundError("x"), 404),
            (ProductNotFoundError("p"), 404),
            (RateLimitError(), 429),
            (ServiceUnavailableError("x"), 503),
            (EmptyCatalogueError(), 503),
            (InternalError("x"), 500),
            (InventoryUpdateFailedError("p"), 500),
            (StorefrontError("x"), 500),
        ],
    )
    def test_mapping(self, error, expected):
        assert status_for(error) == expected


class TestHandlers:
    @pytest.fixture
    def client(self):
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/raise/{kind}")
        def raise_error(kind: str):
            errors = {
                "auth": InvalidTokenError(),
                "internal": InternalError("disk on fire", code="DISK", details={"secret": 1}),
                "unavailable": EmptyCatalogueError(),
                "validation": ValidationError("bad", code="BAD", details={"field": "x"}),
            }
            raise errors[kind]

        return TestClient(app)

    def test_client_error_body(self, client):
        response = client.get("/raise/validation")

        assert response.status_code == 400
        assert response.json() == {"error": "BAD", "message": "bad", "details": {"field": "x"}}

    def test_authentication_error_sets_challenge(self, client):
        response = client.get("/raise/auth")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["error"] == "INVALID_TOKEN"

    def test_internal_error_is_not_disclosed(self, client):
        response = client.get("/raise/internal")

        assert response.status_code == 500
        assert response.json() == {
            "error": "DISK",
            "message": "An internal server error occurred",
            "details": {},
        }

    def test_service_unavailable_keeps_message(self, client):
        response = client.get("/raise/unavailable")

        assert response.status_code == 503
        assert response.json()["error"] == "CATALOGUE_UNAVAILABLE"
        assert "unavailable" in response.json()["message"]
