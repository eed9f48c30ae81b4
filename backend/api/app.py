"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings

from .dependencies import get_container
from .errors import register_exception_handlers
from .middleware.rate_limit import install_rate_limiting
from .routes import health
from modules.auth.routes import router as auth_router
from modules.catalog.routes import router as catalog_router
from modules.checkout.routes import router as checkout_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Seeds the product catalogue and runs the authorization code reaper
    for the lifetime of the app.
    """
    # Startup
    container = get_container()
    settings = container.settings
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    loaded = container.product_repository.load_from_file(settings.products_file)
    if loaded == 0:
        logger.warning(
            f"No product data loaded - server will operate with empty catalogue "
            f"(expected {settings.products_file})"
        )

    container.reaper.start()
    yield
    # Shutdown
    await container.reaper.stop()
    logger.info(f"Shutting down {settings.app_name}")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings for the app-level middleware. Defaults to the
            cached environment settings.

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Storefront catalogue, login and checkout API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    install_rate_limiting(app, settings)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, prefix="/auth", tags=["auth"])
    app.include_router(catalog_router, prefix="/catalog", tags=["catalog"])
    app.include_router(checkout_router, prefix="/checkout", tags=["checkout"])

    return app


# Application instance for uvicorn
app = create_app()
