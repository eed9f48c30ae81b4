"""
Authentication module.

Handles the login / code exchange flow, access tokens and the cleanup of
dead authorization codes.

Public API:
- IAuthService: Interface for login and code exchange
- ITokenService: Interface for issuing and verifying access tokens
- User, AuthorizationCode, AccessTokenClaims: Data models
- Auth exceptions: CodeNotFoundError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService, ITokenService
from .models import (
    User,
    AuthorizationCode,
    AccessTokenClaims,
    LoginRequest,
    LoginResponse,
    TokenRequest,
    TokenResponse,
)
from .exceptions import (
    InvalidEmailError,
    InvalidTokenError,
    ExpiredTokenError,
    TokenAudienceMismatchError,
    TokenIssuerMismatchError,
    MissingTokenError,
    AuthorizationCodeError,
    CodeNotFoundError,
    CodeAlreadyUsedError,
    CodeExpiredError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "ITokenService",
    # Models
    "User",
    "AuthorizationCode",
    "AccessTokenClaims",
    "LoginRequest",
    "LoginResponse",
    "TokenRequest",
    "TokenResponse",
    # Exceptions
    "InvalidEmailError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "TokenAudienceMismatchError",
    "TokenIssuerMismatchError",
    "MissingTokenError",
    "AuthorizationCodeError",
    "CodeNotFoundError",
    "CodeAlreadyUsedError",
    "CodeExpiredError",
]
