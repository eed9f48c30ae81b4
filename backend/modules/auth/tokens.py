"""
Access token service.

Issues and verifies HS256-signed JWTs. Tokens are stateless: there is no
revocation list, so a token stays valid until its exp claim passes.
"""

from datetime import timedelta
from typing import Optional

import jwt

from shared.clock import Clock, utc_now

from .interfaces import ITokenService
from .models import AccessTokenClaims
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    TokenAudienceMismatchError,
    TokenIssuerMismatchError,
)


ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "iss", "aud", "iat", "exp"]


class TokenService(ITokenService):
    """
    JWT implementation of ITokenService.

    Expiry is checked against the injected clock rather than PyJWT's own
    wall-clock check, so issue and verify agree on what "now" is.
    """

    def __init__(
        self,
        secret: str,
        issuer: str,
        audience: str,
        ttl: timedelta,
        clock: Clock = utc_now,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._ttl = ttl
        self._clock = clock

    @property
    def expires_in(self) -> int:
        return int(self._ttl.total_seconds())

    def issue(self, subject: str) -> str:
        now = self._clock()
        payload = {
            "sub": subject,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> AccessTokenClaims:
        if not token:
            raise InvalidTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={
                    "require": REQUIRED_CLAIMS,
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidAudienceError:
            raise TokenAudienceMismatchError()
        except jwt.InvalidIssuerError:
            raise TokenIssuerMismatchError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        try:
            claims = AccessTokenClaims(**payload)
        except ValueError as e:
            raise InvalidTokenError(f"Invalid token claims: {e}")

        if claims.exp <= int(self._clock().timestamp()):
            raise ExpiredTokenError()

        return claims

    def extract_from_authorization_header(self, header: Optional[str]) -> Optional[str]:
        if not header:
            return None

        parts = header.split(" ")
        if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
            return None

        return parts[1]
