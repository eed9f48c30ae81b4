"""Tests for the checkout endpoint."""

import pytest


def order(*lines):
    return {"items": [{"productId": pid, "quantity": qty} for pid, qty in lines]}


class TestCheckoutAuthentication:
    """POST /checkout requires a valid bearer token."""

    def test_missing_token(self, seeded_client):
        response = seeded_client.post("/checkout", json=order(("prod_1", 1)))

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json() == {
            "error": "MISSING_TOKEN",
            "message": "Missing or invalid Authorization header. Expected format: Bearer <token>",
            "details": {},
        }

    def test_wrong_scheme(self, seeded_client):
        response = seeded_client.post(
            "/checkout",
            json=order(("prod_1", 1)),
            headers={"Authorization": "Basic abc"},
        )
        assert response.status_code == 401
        assert response.json()["error"] == "MISSING_TOKEN"

    def test_invalid_token(self, seeded_client):
        response = seeded_client.post(
            "/checkout",
            json=order(("prod_1", 1)),
            headers={"Authorization": "Bearer not-a-jwt"},
        )
        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_TOKEN"

    def test_rejected_request_changes_nothing(self, seeded_client, container):
        seeded_client.post("/checkout", json=order(("prod_1", 1)))
        assert container.product_repository.get("prod_1").inventory == 10


class TestCheckout:
    """Tests for authenticated checkouts."""

    def test_successful_checkout(self, seeded_client, auth_headers, container):
        response = seeded_client.post(
            "/checkout", json=order(("prod_1", 3)), headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["totalAmount"] == 59.97
        assert data["currency"] == "GBP"
        assert data["paymentIntent"]["status"] == "pending"
        assert data["paymentIntent"]["id"].startswith("pi_")
        assert data["items"] == [
            {"productId": "prod_1", "quantity": 3, "unitPrice": 19.99, "subtotal": 59.97}
        ]
        assert container.product_repository.get("prod_1").inventory == 7

    def test_insufficient_inventory(self, seeded_client, auth_headers, container):
        response = seeded_client.post(
            "/checkout", json=order(("prod_1", 1), ("prod_6", 4)), headers=auth_headers
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "ITEM_UNAVAILABLE"
        assert data["message"] == "prod_6: Insufficient inventory. Available: 3, Requested: 4"
        assert data["details"] == {"product_id": "prod_6", "reason": "insufficient_inventory"}
        assert container.product_repository.get("prod_1").inventory == 10

    def test_inactive_product(self, seeded_client, auth_headers):
        response = seeded_client.post(
            "/checkout", json=order(("prod_4", 1)), headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["details"]["reason"] == "not_active"

    def test_inventory_conflict_is_internal_error(self, seeded_client, auth_headers, container):
        """A debit refused after validation is a 500 with a generic message."""
        response = seeded_client.post(
            "/checkout", json=order(("prod_6", 2), ("prod_6", 2)), headers=auth_headers
        )

        assert response.status_code == 500
        assert response.json()["message"] == "An internal server error occurred"
        assert container.product_repository.get("prod_6").inventory == 3

    def test_empty_catalogue(self, client, auth_headers):
        response = client.post("/checkout", json=order(("prod_1", 1)), headers=auth_headers)

        assert response.status_code == 503
        assert response.json()["error"] == "CATALOGUE_UNAVAILABLE"

    @pytest.mark.parametrize(
        "body",
        [
            {"items": []},
            {},
            {"items": [{"productId": "prod_1", "quantity": 0}]},
            {"items": [{"productId": "prod_1", "quantity": 1001}]},
            {"items": [{"productId": "prod_1", "quantity": "3"}]},
            {"items": [{"productId": "prod_1", "quantity": True}]},
            {"items": [{"productId": "prod_1", "quantity": 2.5}]},
            {"items": [{"productId": "", "quantity": 1}]},
            {"items": [{"productId": "prod_1", "quantity": 1}] * 51},
        ],
    )
    def test_request_validation(self, seeded_client, auth_headers, container, body):
        response = seeded_client.post("/checkout", json=body, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_REQUEST"
        assert container.product_repository.get("prod_1").inventory == 10

    def test_snake_case_input_accepted(self, seeded_client, auth_headers):
        response = seeded_client.post(
            "/checkout",
            json={"items": [{"product_id": "prod_3", "quantity": 2}]},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["totalAmount"] == 24.0
