"""
Authentication service implementation.

Implements the login / code exchange flow: a login issues a single-use
authorization code bound to an email, and redeeming that code (once) yields
an access token for the email.
"""

import logging
import secrets
from datetime import timedelta
from typing import Optional

from shared.clock import Clock, utc_now
from shared.store import KeyValueStore

from .interfaces import IAuthService, ITokenService
from .models import AuthorizationCode, LoginResponse, TokenResponse, User
from .exceptions import (
    CodeAlreadyUsedError,
    CodeExpiredError,
    CodeNotFoundError,
    InvalidEmailError,
)
from .validation import normalize_email


logger = logging.getLogger(__name__)

CODE_ENTROPY_BYTES = 32


def generate_authorization_code() -> str:
    """32 random bytes, base64url encoded without padding."""
    return secrets.token_urlsafe(CODE_ENTROPY_BYTES)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Users and codes live in injected stores. Redemption runs under the
    code's key lock so that the check-then-mark-used step is atomic: of any
    number of concurrent redemptions of one code, exactly one succeeds.
    """

    def __init__(
        self,
        users: KeyValueStore[User],
        codes: KeyValueStore[AuthorizationCode],
        tokens: ITokenService,
        code_ttl: timedelta,
        clock: Clock = utc_now,
    ):
        self._users = users
        self._codes = codes
        self._tokens = tokens
        self._code_ttl = code_ttl
        self._clock = clock

    @property
    def code_expires_in(self) -> int:
        return int(self._code_ttl.total_seconds())

    def login(self, email: str) -> LoginResponse:
        """Issue a new code for the email, creating the user if needed."""
        email = normalize_email(email)
        now = self._clock()

        candidate = User(email=email, created_at=now)
        if self._users.add_if_absent(email, candidate) is candidate:
            logger.info("Created user on first login")

        code = AuthorizationCode(
            code=generate_authorization_code(),
            email=email,
            expires_at=now + self._code_ttl,
            used=False,
        )
        self._codes.set(code.code, code)
        logger.debug(f"Issued authorization code expiring at {code.expires_at.isoformat()}")

        return LoginResponse(
            authorization_code=code.code,
            expires_in=self.code_expires_in,
        )

    def redeem(self, code: str) -> TokenResponse:
        """Exchange a code for an access token. Succeeds at most once per code."""
        with self._codes.lock(code):
            current = self._codes.get(code)

            if current is None:
                raise CodeNotFoundError()

            if current.used:
                logger.info("Rejected reuse of an authorization code")
                raise CodeAlreadyUsedError()

            if current.is_expired(self._clock()):
                self._codes.delete(code)
                raise CodeExpiredError()

            redeemed = current.model_copy(update={"used": True})
            if not self._codes.compare_and_set(code, current, redeemed):
                raise CodeAlreadyUsedError()

        access_token = self._tokens.issue(current.email)
        logger.info("Authorization code exchanged for access token")

        return TokenResponse(
            access_token=access_token,
            token_type="Bearer",
            expires_in=self._tokens.expires_in,
        )

    def user_exists(self, email: str) -> bool:
        return self.get_user(email) is not None

    def get_user(self, email: str) -> Optional[User]:
        try:
            key = normalize_email(email)
        except InvalidEmailError:
            return None
        return self._users.get(key)
