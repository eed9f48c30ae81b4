"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, ValidationError


class InvalidEmailError(ValidationError):
    """Raised when a login email fails format or length rules."""

    def __init__(self, reason: str):
        super().__init__(reason, code="INVALID_EMAIL", details={"reason": reason})


# Access tokens


class InvalidTokenError(AuthenticationError):
    """Raised when an access token is malformed or its signature is wrong."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when an access token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class TokenAudienceMismatchError(AuthenticationError):
    """Raised when the token was issued for a different audience."""

    def __init__(self, message: str = "Token audience does not match"):
        super().__init__(message, code="TOKEN_AUDIENCE_MISMATCH")


class TokenIssuerMismatchError(AuthenticationError):
    """Raised when the token was issued by a different issuer."""

    def __init__(self, message: str = "Token issuer does not match"):
        super().__init__(message, code="TOKEN_ISSUER_MISMATCH")


class MissingTokenError(AuthenticationError):
    """Raised when no usable bearer token is provided."""

    def __init__(
        self,
        message: str = "Missing or invalid Authorization header. Expected format: Bearer <token>",
    ):
        super().__init__(message, code="MISSING_TOKEN")


# Authorization codes


class AuthorizationCodeError(AuthenticationError):
    """Base class for failed code exchanges."""

    pass


class CodeNotFoundError(AuthorizationCodeError):
    """Raised when the presented code was never issued or has been reaped."""

    def __init__(self):
        super().__init__("Invalid authorization code", code="CODE_NOT_FOUND")


class CodeAlreadyUsedError(AuthorizationCodeError):
    """Raised when the presented code has already been exchanged."""

    def __init__(self):
        super().__init__(
            "Authorization code has already been used",
            code="CODE_ALREADY_USED",
        )


class CodeExpiredError(AuthorizationCodeError):
    """Raised when the presented code is past its expiry."""

    def __init__(self):
        super().__init__("Authorization code has expired", code="CODE_EXPIRED")
