"""
FastAPI dependency injection utilities for authentication and services.
"""

from typing import Optional
from fastapi import Depends, Query
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from noticeboard.config import settings
from noticeboard.database import get_db
from noticeboard.models.user import User
from noticeboard.services.auth import AuthService
from noticeboard.services.user import UserService
from noticeboard.services.media import MediaService
from noticeboard.services.property import PropertyService
from noticeboard.services.inquiry import InquiryService
from noticeboard.services.verification import VerificationRequestService
from noticeboard.services.sitemap import SitemapService
from noticeboard.services.dashboard import DashboardService
from noticeboard.utils.exceptions import (
    APIException,
    UnauthorizedError,
    InsufficientPermissionsError
)


# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(db)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> User:
    """
    Get current authenticated user from JWT token.

    Raises:
        UnauthorizedError: If no token provided or token is invalid
        TokenExpiredError: If token is expired
        InactiveUserError: If user account is inactive
    """
    if not credentials:
        raise UnauthorizedError("Authentication token required")

    return await auth_service.get_current_user(credentials.credentials)


async def get_current_admin_user(current_user: User = Depends(get_current_user)) -> User:
    """
    Get current user with admin role.

    Raises:
        InsufficientPermissionsError: If user is not an admin
    """
    if not current_user.is_admin:
        raise InsufficientPermissionsError("access admin resources")

    return current_user


async def get_optional_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> Optional[User]:
    """
    Get current user if a valid token is provided, otherwise None.
    An invalid or expired token is treated as anonymous.
    """
    if not credentials:
        return None

    try:
        return await auth_service.get_current_user(credentials.credentials)
    except APIException:
        return None


class PageParams:
    """Page/limit query parameters shared by list endpoints."""

    def __init__(
        self,
        page: int = Query(1, ge=1, description="Page number (1-based)"),
        limit: int = Query(
            settings.default_page_size,
            ge=1,
            le=settings.max_page_size,
            description="Number of records per page"
        )
    ):
        self.page = page
        self.limit = limit


async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


async def get_media_service(db: AsyncSession = Depends(get_db)) -> MediaService:
    return MediaService(db)


async def get_property_service(db: AsyncSession = Depends(get_db)) -> PropertyService:
    return PropertyService(db)


async def get_inquiry_service(db: AsyncSession = Depends(get_db)) -> InquiryService:
    return InquiryService(db)


async def get_verification_service(db: AsyncSession = Depends(get_db)) -> VerificationRequestService:
    return VerificationRequestService(db)


async def get_sitemap_service(db: AsyncSession = Depends(get_db)) -> SitemapService:
    return SitemapService(db)


async def get_dashboard_service(db: AsyncSession = Depends(get_db)) -> DashboardService:
    return DashboardService(db)
