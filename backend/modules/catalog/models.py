"""
Catalog module data models.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from shared.models import CamelModel, Money


class ProductStatus(str, Enum):
    """Lifecycle status of a product. Only active products are sold."""

    ACTIVE = "active"
    DRAFT = "draft"
    ARCHIVED = "archived"


class ProductVariant(BaseModel):
    id: str
    title: str


class Product(BaseModel):
    """
    A catalogue product.

    Immutable; inventory changes store a new instance.
    """

    id: str = Field(..., min_length=1, description="Unique product identifier")
    title: str = Field(..., description="Display title")
    status: ProductStatus = Field(..., description="Lifecycle status")
    price: Money = Field(..., ge=Decimal("0"), description="Unit price")
    inventory: int = Field(..., ge=0, description="Units in stock")
    variants: list[ProductVariant] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def is_active(self) -> bool:
        return self.status == ProductStatus.ACTIVE


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int


class CatalogueResponse(CamelModel):
    """One page of active products."""

    products: list[Product]
    pagination: Pagination


class UnavailableReason(str, Enum):
    """Why a product cannot be supplied, in checking order."""

    NOT_FOUND = "not_found"
    NOT_ACTIVE = "not_active"
    INSUFFICIENT_INVENTORY = "insufficient_inventory"


class Availability(BaseModel):
    """Outcome of an availability check."""

    available: bool
    reason: Optional[UnavailableReason] = None
    message: Optional[str] = None

    model_config = {"frozen": True}
