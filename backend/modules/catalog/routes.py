"""
Catalog API endpoints.
"""

import logging

from fastapi import APIRouter, Depends, Query, Response

from api.dependencies import get_catalog_service, get_product_repository

from .interfaces import ICatalogService
from .models import CatalogueResponse, Product
from .exceptions import ProductNotFoundError
from .repository import ProductRepository

logger = logging.getLogger(__name__)

router = APIRouter()

STORAGE_WARNING_HEADER = "X-Storage-Warning"


@router.get("", response_model=CatalogueResponse)
def list_catalogue(
    response: Response,
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=10, ge=1, le=100, description="Items per page"),
    service: ICatalogService = Depends(get_catalog_service),
    products: ProductRepository = Depends(get_product_repository),
) -> CatalogueResponse:
    """
    List active products, paginated.

    An empty catalogue is a valid result; it is flagged with a warning
    header rather than an error status.
    """
    if not products.is_healthy:
        response.headers[STORAGE_WARNING_HEADER] = (
            "Product data unavailable - returning empty catalogue"
        )
        logger.warning("Catalogue request processed with empty storage")
    return service.list_products(page, limit)


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: str,
    service: ICatalogService = Depends(get_catalog_service),
) -> Product:
    """
    Get a single active product.

    Missing and inactive products both return 404.
    """
    product = service.get_active_by_id(product_id)
    if product is None:
        raise ProductNotFoundError(product_id)
    return product
