"""
Checkout module.

Validates multi-item orders against live inventory, prices them, records a
pending payment intent and debits inventory with all-or-nothing semantics.

Public API:
- ICheckoutService: Interface for processing orders
- CheckoutLine, CheckoutResult, PaymentIntent, PricedLine: Data models
- Checkout exceptions: ItemUnavailableError, EmptyCatalogueError, etc.
"""

from .interfaces import ICheckoutService
from .models import (
    CheckoutLine,
    CheckoutRequest,
    CheckoutResult,
    PaymentIntent,
    PaymentIntentStatus,
    PricedLine,
)
from .exceptions import (
    EmptyCatalogueError,
    ItemUnavailableError,
    InventoryUpdateFailedError,
)

__all__ = [
    # Interface
    "ICheckoutService",
    # Models
    "CheckoutLine",
    "CheckoutRequest",
    "CheckoutResult",
    "PaymentIntent",
    "PaymentIntentStatus",
    "PricedLine",
    # Exceptions
    "EmptyCatalogueError",
    "ItemUnavailableError",
    "InventoryUpdateFailedError",
]
