"""
Base exception classes for the Storefront backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class StorefrontError(Exception):
    """
    Base exception for all Storefront errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(StorefrontError):
    """Resource not found."""

    pass


class ValidationError(StorefrontError):
    """Input validation failed."""

    pass


class AuthenticationError(StorefrontError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AvailabilityError(StorefrontError):
    """Requested items cannot be supplied in the current inventory state."""

    pass


class RateLimitError(StorefrontError):
    """Too many requests from one client within the configured window."""

    def __init__(
        self,
        message: str = "Too many requests. Please try again later.",
        limit: Optional[str] = None,
    ):
        super().__init__(
            message,
            code="RATE_LIMIT_EXCEEDED",
            details={"limit": limit} if limit else None,
        )


class ServiceUnavailableError(StorefrontError):
    """A backing resource is not available to serve the request."""

    pass


class InternalError(StorefrontError):
    """
    Server-side inconsistency.

    The message is logged but never returned to the caller verbatim.
    """

    public_message = "An internal server error occurred"
