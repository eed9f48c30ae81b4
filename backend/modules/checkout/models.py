"""
Checkout module data models.
"""

from enum import Enum

from pydantic import Field

from shared.models import CamelModel, Money


MAX_LINE_QUANTITY = 1000
MAX_LINES = 50


class CheckoutLine(CamelModel):
    """One requested product and quantity."""

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1, le=MAX_LINE_QUANTITY, strict=True)


class CheckoutRequest(CamelModel):
    items: list[CheckoutLine] = Field(..., min_length=1, max_length=MAX_LINES)


class PaymentIntentStatus(str, Enum):
    """Intents are only ever created pending; nothing settles them."""

    PENDING = "pending"


class PaymentIntent(CamelModel):
    """
    Internal record of a pending charge.

    Not connected to any payment network.
    """

    id: str
    status: PaymentIntentStatus
    amount: Money


class PricedLine(CamelModel):
    product_id: str
    quantity: int
    unit_price: Money
    subtotal: Money


class CheckoutResult(CamelModel):
    """Outcome of a successful checkout."""

    success: bool = True
    total_amount: Money
    currency: str
    payment_intent: PaymentIntent
    items: list[PricedLine]
