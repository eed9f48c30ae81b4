"""
Catalog module.

Read-only access to the active product catalogue, plus the product
repository that checkout uses to debit inventory.

Public API:
- ICatalogService: Interface for catalogue reads and availability checks
- Product, ProductStatus, CatalogueResponse, Availability: Data models
- ProductNotFoundError
"""

from .interfaces import ICatalogService
from .models import (
    Product,
    ProductStatus,
    ProductVariant,
    Pagination,
    CatalogueResponse,
    Availability,
    UnavailableReason,
)
from .exceptions import ProductNotFoundError

__all__ = [
    # Interface
    "ICatalogService",
    # Models
    "Product",
    "ProductStatus",
    "ProductVariant",
    "Pagination",
    "CatalogueResponse",
    "Availability",
    "UnavailableReason",
    # Exceptions
    "ProductNotFoundError",
]
