"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
a controllable clock, fresh stores and services, and an API client wired to
an isolated service container.
"""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from fastapi.testclient import TestClient

from api.dependencies import ServiceContainer, set_container, reset_container
from modules.auth.service import AuthService
from modules.auth.tokens import TokenService
from modules.catalog.models import Product, ProductStatus
from modules.catalog.repository import ProductRepository
from modules.catalog.service import CatalogService
from modules.checkout.service import CheckoutService
from shared.config import Settings
from shared.store import EntityStore


# Test signing secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"
TEST_ISSUER = "storefront-test"
TEST_AUDIENCE = "storefront-test-app"


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


def make_product(
    product_id: str = "prod_1",
    price: str = "19.99",
    inventory: int = 10,
    status: ProductStatus = ProductStatus.ACTIVE,
    title: str | None = None,
) -> Product:
    """Build a product with sensible defaults."""
    return Product(
        id=product_id,
        title=title or f"Product {product_id}",
        status=status,
        price=Decimal(price),
        inventory=inventory,
        variants=[],
    )


def sample_products() -> list[Product]:
    return [
        make_product("prod_1", price="19.99", inventory=10),
        make_product("prod_2", price="49.50", inventory=25),
        make_product("prod_3", price="12.00", inventory=40),
        make_product("prod_4", price="5.00", inventory=5, status=ProductStatus.DRAFT),
        make_product("prod_5", price="8.00", inventory=0, status=ProductStatus.ARCHIVED),
        make_product("prod_6", price="15.75", inventory=3),
    ]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings isolated from the environment."""
    return Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        jwt_issuer=TEST_ISSUER,
        jwt_audience=TEST_AUDIENCE,
        jwt_expiration="1h",
        auth_code_expiration="10m",
        auth_code_cleanup_interval="5m",
        currency="GBP",
        products_file=str(tmp_path / "missing-products.json"),
    )


@pytest.fixture
def store() -> EntityStore:
    return EntityStore()


@pytest.fixture
def token_service(clock) -> TokenService:
    return TokenService(
        secret=TEST_JWT_SECRET,
        issuer=TEST_ISSUER,
        audience=TEST_AUDIENCE,
        ttl=timedelta(hours=1),
        clock=clock,
    )


@pytest.fixture
def auth_service(store, token_service, clock) -> AuthService:
    return AuthService(
        users=store.users,
        codes=store.auth_codes,
        tokens=token_service,
        code_ttl=timedelta(minutes=10),
        clock=clock,
    )


@pytest.fixture
def product_repository(store) -> ProductRepository:
    return ProductRepository(store.products)


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def seeded_products(product_repository) -> ProductRepository:
    """Repository holding a small mixed catalogue."""
    for product in sample_products():
        product_repository.add(product)
    return product_repository


@pytest.fixture
def catalog_service(product_repository) -> CatalogService:
    return CatalogService(product_repository)


@pytest.fixture
def checkout_service(product_repository, catalog_service) -> CheckoutService:
    return CheckoutService(
        products=product_repository,
        catalog=catalog_service,
        currency="GBP",
    )


@pytest.fixture
def container(settings, store):
    """An isolated service container installed for the duration of a test."""
    container = ServiceContainer(settings=settings, store=store)
    set_container(container)
    yield container
    reset_container()


@pytest.fixture
def client(container) -> TestClient:
    """API client backed by the isolated container (lifespan not run)."""
    from api.app import create_app

    return TestClient(create_app(container.settings))


@pytest.fixture
def seeded_client(client, container) -> TestClient:
    """API client whose store holds the sample catalogue."""
    for product in sample_products():
        container.product_repository.add(product)
    return client


@pytest.fixture
def access_token(client) -> str:
    """Obtain a real access token through the login / exchange flow."""
    login = client.post("/auth/login", json={"email": "shopper@example.com"})
    code = login.json()["authorizationCode"]
    exchange = client.post("/auth/token", json={"code": code})
    return exchange.json()["accessToken"]


@pytest.fixture
def auth_headers(access_token) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {access_token}"}
