"""
Catalog service implementation.
"""

import math
from typing import Optional

from .interfaces import ICatalogService
from .models import (
    Availability,
    CatalogueResponse,
    Pagination,
    Product,
    UnavailableReason,
)
from .repository import ProductRepository


class CatalogService(ICatalogService):
    """Catalogue reads over the product repository."""

    def __init__(self, products: ProductRepository):
        self._products = products

    def list_products(self, page: int = 1, limit: int = 10) -> CatalogueResponse:
        active = [p for p in self._products.list_all() if p.is_active]

        total_items = len(active)
        total_pages = math.ceil(total_items / limit)
        start = (page - 1) * limit

        return CatalogueResponse(
            products=active[start : start + limit],
            pagination=Pagination(
                current_page=page,
                total_pages=total_pages,
                total_items=total_items,
                items_per_page=limit,
            ),
        )

    def get_active_by_id(self, product_id: str) -> Optional[Product]:
        product = self._products.get(product_id)
        if product is None or not product.is_active:
            return None
        return product

    def check_availability(self, product_id: str, quantity: int) -> Availability:
        product = self._products.get(product_id)

        if product is None:
            return Availability(
                available=False,
                reason=UnavailableReason.NOT_FOUND,
                message="Product not found",
            )

        if not product.is_active:
            return Availability(
                available=False,
                reason=UnavailableReason.NOT_ACTIVE,
                message="Product is not available for purchase",
            )

        if product.inventory < quantity:
            return Availability(
                available=False,
                reason=UnavailableReason.INSUFFICIENT_INVENTORY,
                message=(
                    f"Insufficient inventory. Available: {product.inventory}, "
                    f"Requested: {quantity}"
                ),
            )

        return Availability(available=True)
