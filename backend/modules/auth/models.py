"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from shared.models import CamelModel

from .exceptions import InvalidEmailError
from .validation import normalize_email


class User(BaseModel):
    """
    A shopper, keyed by normalized email.

    Created on the first login attempt for an email and never modified.
    """

    email: str = Field(..., description="Normalized email address")
    created_at: datetime = Field(..., description="When the user first logged in")

    model_config = {"frozen": True}


class AuthorizationCode(BaseModel):
    """
    A single-use, short-lived code exchanged for an access token.

    Instances are immutable; marking a code used stores a new instance.
    """

    code: str = Field(..., description="Opaque URL-safe random value")
    email: str = Field(..., description="Email the code was issued to")
    expires_at: datetime = Field(..., description="Absolute expiry instant")
    used: bool = Field(default=False, description="Whether the code was exchanged")

    model_config = {"frozen": True}

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at

    def is_dead(self, now: datetime) -> bool:
        """Used or expired codes can never be redeemed again."""
        return self.used or self.expires_at < now


class AccessTokenClaims(BaseModel):
    """Decoded access-token payload."""

    sub: str = Field(..., description="Subject (user email)")
    iss: str = Field(..., description="Issuer")
    aud: str = Field(..., description="Audience")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class LoginRequest(CamelModel):
    """Request to start a login by email."""

    email: str = Field(..., description="User's email address")

    @field_validator("email", mode="before")
    @classmethod
    def _normalize(cls, value: object) -> str:
        try:
            return normalize_email(value)
        except InvalidEmailError as e:
            raise ValueError(e.message) from e


class LoginResponse(CamelModel):
    """Authorization code issued by a login."""

    authorization_code: str
    expires_in: int = Field(..., description="Seconds until the code expires")


class TokenRequest(CamelModel):
    """Request to exchange an authorization code."""

    code: str = Field(..., min_length=1, max_length=500)


class TokenResponse(CamelModel):
    """Access token issued for a redeemed code."""

    access_token: str
    token_type: Literal["Bearer"] = "Bearer"
    expires_in: int = Field(..., description="Seconds until the token expires")
