"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations over one shared
entity store.

Swapping the in-memory store for a persistent backend only requires
changing how the container builds its EntityStore.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings
from shared.store import EntityStore

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, ITokenService
    from modules.auth.reaper import AuthCodeReaper
    from modules.catalog.interfaces import ICatalogService
    from modules.catalog.repository import ProductRepository
    from modules.checkout.interfaces import ICheckoutService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[EntityStore] = None,
    ) -> None:
        self._settings = settings
        self._store = store
        self._token_service: "ITokenService | None" = None
        self._auth_service: "IAuthService | None" = None
        self._product_repository: "ProductRepository | None" = None
        self._catalog_service: "ICatalogService | None" = None
        self._checkout_service: "ICheckoutService | None" = None
        self._reaper: "AuthCodeReaper | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def store(self) -> EntityStore:
        """Get the shared entity store."""
        if self._store is None:
            self._store = EntityStore()
        return self._store

    @property
    def tokens(self) -> "ITokenService":
        """Get the access token service instance."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            self._token_service = TokenService(
                secret=self.settings.jwt_secret,
                issuer=self.settings.jwt_issuer,
                audience=self.settings.jwt_audience,
                ttl=self.settings.jwt_ttl,
            )
        return self._token_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.store.users,
                codes=self.store.auth_codes,
                tokens=self.tokens,
                code_ttl=self.settings.auth_code_ttl,
            )
        return self._auth_service

    @property
    def product_repository(self) -> "ProductRepository":
        """Get the product repository instance."""
        if self._product_repository is None:
            from modules.catalog.repository import ProductRepository
            self._product_repository = ProductRepository(self.store.products)
        return self._product_repository

    @property
    def catalog(self) -> "ICatalogService":
        """Get the catalog service instance."""
        if self._catalog_service is None:
            from modules.catalog.service import CatalogService
            self._catalog_service = CatalogService(self.product_repository)
        return self._catalog_service

    @property
    def checkout(self) -> "ICheckoutService":
        """Get the checkout service instance."""
        if self._checkout_service is None:
            from modules.checkout.service import CheckoutService
            self._checkout_service = CheckoutService(
                products=self.product_repository,
                catalog=self.catalog,
                currency=self.settings.currency,
            )
        return self._checkout_service

    @property
    def reaper(self) -> "AuthCodeReaper":
        """Get the authorization code reaper."""
        if self._reaper is None:
            from modules.auth.reaper import AuthCodeReaper
            self._reaper = AuthCodeReaper(
                codes=self.store.auth_codes,
                interval=self.settings.cleanup_interval,
            )
        return self._reaper

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different settings. The store is dropped too.
        """
        self._store = None
        self._token_service = None
        self._auth_service = None
        self._product_repository = None
        self._catalog_service = None
        self._checkout_service = None
        self._reaper = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a pre-built container (used by tests)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_service() -> "ITokenService":
    """FastAPI dependency for the token service."""
    return get_container().tokens


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_product_repository() -> "ProductRepository":
    """FastAPI dependency for the product repository."""
    return get_container().product_repository


def get_catalog_service() -> "ICatalogService":
    """FastAPI dependency for catalog service."""
    return get_container().catalog


def get_checkout_service() -> "ICheckoutService":
    """FastAPI dependency for checkout service."""
    return get_container().checkout
