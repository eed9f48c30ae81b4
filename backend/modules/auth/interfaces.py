"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. The checkout route only needs ITokenService to identify
the caller.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import AccessTokenClaims, LoginResponse, TokenResponse, User


@runtime_checkable
class ITokenService(Protocol):
    """Interface for issuing and verifying signed access tokens."""

    @property
    def expires_in(self) -> int:
        """Lifetime of newly issued tokens, in seconds."""
        ...

    def issue(self, subject: str) -> str:
        """
        Mint a signed access token for a subject.

        Args:
            subject: Normalized user email

        Returns:
            Compact serialized token
        """
        ...

    def verify(self, token: str) -> AccessTokenClaims:
        """
        Verify a token's signature, issuer, audience and expiry.

        Args:
            token: Compact serialized token

        Returns:
            Decoded claims

        Raises:
            InvalidTokenError: Malformed token or bad signature
            ExpiredTokenError: Token is past its exp claim
            TokenAudienceMismatchError: Audience differs from configuration
            TokenIssuerMismatchError: Issuer differs from configuration
        """
        ...

    def extract_from_authorization_header(self, header: Optional[str]) -> Optional[str]:
        """
        Pull the token out of an ``Authorization: Bearer <token>`` value.

        Returns None for any other shape.
        """
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for the login / code exchange flow.

    This protocol defines the contract that the auth module exposes
    to the API layer.
    """

    def login(self, email: str) -> LoginResponse:
        """
        Issue a fresh authorization code for an email.

        Creates the user on first login.

        Raises:
            InvalidEmailError: If the email is malformed
        """
        ...

    def redeem(self, code: str) -> TokenResponse:
        """
        Exchange an authorization code for an access token, exactly once.

        Raises:
            CodeNotFoundError: Unknown code
            CodeAlreadyUsedError: Code was already exchanged
            CodeExpiredError: Code is past its expiry
        """
        ...

    def user_exists(self, email: str) -> bool:
        ...

    def get_user(self, email: str) -> Optional[User]:
        ...
