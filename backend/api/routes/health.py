"""
Health check endpoints.

Provides endpoints for monitoring application health and storage state.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.models import CamelModel
from modules.catalog.repository import ProductRepository

from ..dependencies import get_container, get_product_repository

router = APIRouter()


class StorageStats(CamelModel):
    products: int
    users: int
    auth_codes: int


class StorageHealth(BaseModel):
    healthy: bool
    message: str
    stats: StorageStats


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    timestamp: datetime
    storage: StorageHealth


@router.get("/health", response_model=HealthResponse)
def health_check(
    products: ProductRepository = Depends(get_product_repository),
) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 whenever the API is running; an empty catalogue is
    reported in the storage section rather than as a failure.
    """
    container = get_container()
    has_products = products.count() > 0

    return HealthResponse(
        status="healthy",
        version=container.settings.app_version,
        timestamp=datetime.now(timezone.utc),
        storage=StorageHealth(
            healthy=products.is_healthy,
            message=(
                "Storage is healthy and operational"
                if has_products
                else "Storage is empty - no product data available"
            ),
            stats=StorageStats(**container.store.stats()),
        ),
    )
