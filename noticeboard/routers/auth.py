"""
Authentication API endpoints for registration, login, token refresh and the current user.
"""

from fastapi import APIRouter, Depends, status
from noticeboard.config import settings
from noticeboard.models.user import User
from noticeboard.services.auth import AuthService
from noticeboard.services.user import UserService
from noticeboard.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RefreshTokenRequest,
    AccessTokenResponse,
    TokenResponse
)
from noticeboard.schemas.user import UserCreate, UserResponse
from noticeboard.services.error_handler import ERROR_RESPONSES
from noticeboard.utils.dependencies import get_auth_service, get_current_user, get_user_service


router = APIRouter(prefix="/auth", tags=["Authentication"])


def _login_response(user: User, access_token: str, refresh_token: str) -> LoginResponse:
    return LoginResponse(
        user=UserResponse.model_validate(user),
        tokens=TokenResponse(
            access_token=access_token,
            refresh_token=refresh_token,
            token_type="bearer",
            expires_in=settings.access_token_expire_minutes * 60
        )
    )


@router.post(
    "/register",
    response_model=LoginResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new account",
    description="Create a user account. The first account ever created becomes an administrator.",
    responses={409: ERROR_RESPONSES[409], 422: ERROR_RESPONSES[422]}
)
async def register(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service),
    auth_service: AuthService = Depends(get_auth_service)
) -> LoginResponse:
    user = await user_service.register(user_data.model_dump(exclude_unset=True))
    access_token, refresh_token = auth_service.create_tokens(user)
    return _login_response(user, access_token, refresh_token)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="User login",
    description="Authenticate user with email and password, returns JWT tokens",
    responses={401: ERROR_RESPONSES[401]}
)
async def login(
    login_data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
) -> LoginResponse:
    user, access_token, refresh_token = await auth_service.login(
        email=login_data.email,
        password=login_data.password
    )
    return _login_response(user, access_token, refresh_token)


@router.post(
    "/refresh",
    response_model=AccessTokenResponse,
    summary="Refresh access token",
    description="Generate new access token using refresh token",
    responses={401: ERROR_RESPONSES[401]}
)
async def refresh_token(
    refresh_data: RefreshTokenRequest,
    auth_service: AuthService = Depends(get_auth_service)
) -> AccessTokenResponse:
    access_token = await auth_service.refresh_access_token(refresh_data.refresh_token)
    return AccessTokenResponse(
        access_token=access_token,
        token_type="bearer",
        expires_in=settings.access_token_expire_minutes * 60
    )


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user",
    responses={401: ERROR_RESPONSES[401]}
)
async def get_me(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(current_user)
