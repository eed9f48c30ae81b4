"""
Checkout module interface.
"""

from typing import Protocol, Sequence, runtime_checkable

from .models import CheckoutLine, CheckoutResult


@runtime_checkable
class ICheckoutService(Protocol):
    """Interface for processing orders against live inventory."""

    def process(self, lines: Sequence[CheckoutLine]) -> CheckoutResult:
        """
        Validate, price and debit an order, all or nothing.

        Args:
            lines: Requested products and quantities, debited in this order

        Returns:
            CheckoutResult with the priced lines and a pending payment intent

        Raises:
            EmptyCatalogueError: The product store is empty
            ItemUnavailableError: A line failed its availability check
            InventoryUpdateFailedError: A debit failed; earlier debits were rolled back
        """
        ...
