"""
Authentication API endpoints.

Login issues an authorization code; the token endpoint exchanges it for an
access token. Code failures are raised as AuthorizationCodeError and turned
into 400 responses by the application's error handlers.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service

from .interfaces import IAuthService
from .models import LoginRequest, LoginResponse, TokenRequest, TokenResponse

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Start a login.

    Creates the user on first login and returns a single-use
    authorization code.
    """
    return service.login(request.email)


@router.post("/token", response_model=TokenResponse)
def exchange_token(
    request: TokenRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Exchange an authorization code for a bearer access token.

    Each code can be exchanged once.
    """
    return service.redeem(request.code)
