"""
Exception handlers.

Maps module exceptions onto HTTP responses so routes can let them
propagate. Internal errors are logged in full and returned generically.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from modules.auth.exceptions import AuthorizationCodeError
from shared.exceptions import (
    StorefrontError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AvailabilityError,
    RateLimitError,
    ServiceUnavailableError,
    InternalError,
)

from .models.errors import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

# First match wins, so subclasses come before their bases.
_STATUS_BY_ERROR: list[tuple[type[StorefrontError], int]] = [
    (AuthorizationCodeError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AvailabilityError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (RateLimitError, status.HTTP_429_TOO_MANY_REQUESTS),
    (ServiceUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(error: StorefrontError) -> int:
    """HTTP status for a module exception."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    status_code = status_for(exc)

    if status_code >= 500 and not isinstance(exc, ServiceUnavailableError):
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message}",
            extra={"error_code": exc.code, "details": exc.details},
        )
        body = ErrorResponse(error=exc.code, message=InternalError.public_message)
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.code}")
        body = ErrorResponse(**exc.to_dict())

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        headers=headers,
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    if location:
        message = f"{location}: {message}"

    body = ValidationErrorResponse(message=message, details=jsonable_encoder(errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(body),
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    # Synchronous: SlowAPIMiddleware calls this handler without awaiting it.
    error = RateLimitError(limit=str(exc.detail))
    logger.warning(f"{request.method} {request.url.path} rate limited: {exc.detail}")

    return JSONResponse(
        status_code=status_for(error),
        content=jsonable_encoder(ErrorResponse(**error.to_dict())),
        headers={"Retry-After": str(exc.limit.limit.get_expiry())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
