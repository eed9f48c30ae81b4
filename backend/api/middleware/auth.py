"""
Bearer token authentication dependency.

Verifies access tokens issued by the token service and extracts the caller.
Failures propagate as AuthenticationError, which the application's error
handlers render as 401 with a WWW-Authenticate challenge.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, Header

from modules.auth.interfaces import ITokenService
from modules.auth.exceptions import MissingTokenError
from shared.models import AuthenticatedUser

from ..dependencies import get_token_service


def authenticate(authorization: Optional[str], tokens: ITokenService) -> AuthenticatedUser:
    """
    Resolve an Authorization header value to the authenticated caller.

    Raises:
        MissingTokenError: If the header is absent or not "Bearer <token>"
        AuthenticationError: If the token fails verification
    """
    token = tokens.extract_from_authorization_header(authorization)
    if token is None:
        raise MissingTokenError()

    claims = tokens.verify(token)

    return AuthenticatedUser(
        email=claims.sub,
        issued_at=datetime.fromtimestamp(claims.iat, tz=timezone.utc),
        expires_at=datetime.fromtimestamp(claims.exp, tz=timezone.utc),
    )


def get_current_user(
    authorization: Optional[str] = Header(default=None),
    tokens: ITokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.post("/protected")
        def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"email": user.email}
    """
    return authenticate(authorization, tokens)
