"""
Checkout service implementation.

Processes an order in four passes: availability check, pricing, payment
intent creation, and inventory debit. The whole sequence runs while holding
the key locks of every product in the order, so concurrent checkouts that
share a product are serialized and cannot both pass validation against the
same stock.
"""

import logging
import secrets
from decimal import Decimal
from typing import Sequence

from shared.exceptions import ValidationError
from modules.catalog.interfaces import ICatalogService
from modules.catalog.models import UnavailableReason
from modules.catalog.repository import ProductRepository

from .interfaces import ICheckoutService
from .models import (
    CheckoutLine,
    CheckoutResult,
    PaymentIntent,
    PaymentIntentStatus,
    PricedLine,
)
from .exceptions import (
    EmptyCatalogueError,
    InventoryUpdateFailedError,
    ItemUnavailableError,
)


logger = logging.getLogger(__name__)


def generate_payment_intent_id() -> str:
    return f"pi_{secrets.token_hex(16)}"


class CheckoutService(ICheckoutService):
    """
    All-or-nothing checkout over the product repository.

    No line's debit survives a checkout that fails: if any debit is
    refused, the debits already applied are restocked before the error
    propagates.
    """

    def __init__(
        self,
        products: ProductRepository,
        catalog: ICatalogService,
        currency: str = "GBP",
    ):
        self._products = products
        self._catalog = catalog
        self._currency = currency

    def process(self, lines: Sequence[CheckoutLine]) -> CheckoutResult:
        if not lines:
            raise ValidationError("Items array cannot be empty", code="EMPTY_ORDER")

        if self._products.count() == 0:
            logger.error("Checkout failed: product storage is empty")
            raise EmptyCatalogueError()

        with self._products.lock(*{line.product_id for line in lines}):
            self._validate(lines)
            priced, total = self._price(lines)
            payment_intent = PaymentIntent(
                id=generate_payment_intent_id(),
                status=PaymentIntentStatus.PENDING,
                amount=total,
            )
            self._debit(lines)

        logger.info(
            f"Checkout successful: {len(lines)} items, "
            f"total: {total} {self._currency}"
        )

        return CheckoutResult(
            success=True,
            total_amount=total,
            currency=self._currency,
            payment_intent=payment_intent,
            items=priced,
        )

    def _validate(self, lines: Sequence[CheckoutLine]) -> None:
        """Reject the order on the first unavailable line. Mutates nothing."""
        for line in lines:
            availability = self._catalog.check_availability(line.product_id, line.quantity)
            if not availability.available:
                logger.warning(
                    f"Checkout validation failed for {line.product_id}: {availability.message}"
                )
                raise ItemUnavailableError(
                    line.product_id,
                    availability.reason,
                    availability.message,
                )

    def _price(self, lines: Sequence[CheckoutLine]) -> tuple[list[PricedLine], Decimal]:
        priced: list[PricedLine] = []
        total = Decimal("0")

        for line in lines:
            product = self._catalog.get_active_by_id(line.product_id)
            if product is None:
                logger.error(
                    f"Checkout failed: product {line.product_id} not found during pricing"
                )
                raise ItemUnavailableError(
                    line.product_id,
                    UnavailableReason.NOT_FOUND,
                    "Product not found",
                )

            subtotal = product.price * line.quantity
            total += subtotal
            priced.append(
                PricedLine(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    unit_price=product.price,
                    subtotal=subtotal,
                )
            )

        return priced, total

    def _debit(self, lines: Sequence[CheckoutLine]) -> None:
        applied: list[CheckoutLine] = []
        try:
            for line in lines:
                if not self._products.try_debit(line.product_id, line.quantity):
                    logger.error(
                        f"Inventory update failed for {line.product_id}, rolling back..."
                    )
                    raise InventoryUpdateFailedError(line.product_id)
                applied.append(line)
        except Exception:
            self._rollback(applied)
            raise

    def _rollback(self, applied: Sequence[CheckoutLine]) -> None:
        if not applied:
            return

        logger.warning(f"Rolling back {len(applied)} inventory updates")
        for line in reversed(applied):
            if self._products.restock(line.product_id, line.quantity):
                logger.warning(
                    f"Rolled back inventory for {line.product_id}: +{line.quantity}"
                )
            else:
                logger.error(
                    f"Could not roll back inventory for {line.product_id}: product missing"
                )
