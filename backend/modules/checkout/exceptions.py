"""
Checkout module exceptions.

These exceptions are raised by the checkout module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import (
    AvailabilityError,
    InternalError,
    ServiceUnavailableError,
)
from modules.catalog.models import UnavailableReason


class EmptyCatalogueError(ServiceUnavailableError):
    """
    Raised when the product store holds no products at all.

    Distinct from a single item being unavailable: nothing can be sold
    until the catalogue is loaded.
    """

    def __init__(self):
        super().__init__(
            "Product catalogue is currently unavailable. "
            "Unable to process checkout. Please try again later.",
            code="CATALOGUE_UNAVAILABLE",
        )


class ItemUnavailableError(AvailabilityError):
    """Raised when a checkout line fails its availability check."""

    def __init__(self, product_id: str, reason: UnavailableReason, message: str):
        super().__init__(
            f"{product_id}: {message}",
            code="ITEM_UNAVAILABLE",
            details={"product_id": product_id, "reason": reason.value},
        )
        self.product_id = product_id
        self.reason = reason


class InventoryUpdateFailedError(InternalError):
    """
    Raised when an inventory debit fails after validation passed.

    Every debit already applied by the same checkout is rolled back before
    this propagates.
    """

    def __init__(self, product_id: str):
        super().__init__(
            f"Failed to update inventory for {product_id}",
            code="INVENTORY_UPDATE_FAILED",
            details={"product_id": product_id},
        )
        self.product_id = product_id
