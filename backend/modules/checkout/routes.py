"""
Checkout API endpoint.
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_checkout_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import ICheckoutService
from .models import CheckoutRequest, CheckoutResult

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=CheckoutResult)
def checkout(
    request: CheckoutRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICheckoutService = Depends(get_checkout_service),
) -> CheckoutResult:
    """
    Process an order and create a pending payment intent.

    Requires a bearer access token. Either every line is debited from
    inventory or none is.
    """
    logger.debug(f"Checkout of {len(request.items)} lines requested")
    return service.process(request.items)
