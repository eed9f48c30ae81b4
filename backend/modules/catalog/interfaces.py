"""
Catalog module interface.

The checkout module depends on ICatalogService for its availability checks
and product lookups.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Availability, CatalogueResponse, Product


@runtime_checkable
class ICatalogService(Protocol):
    """Read-only view over the active catalogue."""

    def list_products(self, page: int = 1, limit: int = 10) -> CatalogueResponse:
        """
        Get one page of active products.

        Args:
            page: 1-indexed page number
            limit: Page size

        Returns:
            CatalogueResponse; pages past the end are empty, not errors
        """
        ...

    def get_active_by_id(self, product_id: str) -> Optional[Product]:
        """
        Get a product if it exists and is active.

        Returns None for missing and for inactive products alike.
        """
        ...

    def check_availability(self, product_id: str, quantity: int) -> Availability:
        """
        Check whether quantity units of a product can be sold.

        Reasons are reported in priority order: not found, not active,
        insufficient inventory.
        """
        ...
