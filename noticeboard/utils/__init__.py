"""
Utility modules for the Real Notice Board API.
"""

from .auth import create_access_token, create_refresh_token, verify_token, TokenPayload

from .exceptions import (
    APIException,
    ValidationError,
    NotFoundError,
    UnauthorizedError,
    ForbiddenError,
    ConflictError,
    BadRequestError,
    InvalidCredentialsError,
    TokenExpiredError,
    InvalidTokenError,
    InactiveUserError,
    InsufficientPermissionsError,
    DuplicateResourceError
)

from .slug import slugify, unique_slug
from .cache import TaggedCache, sitemap_cache, revalidate_tag

# Dependencies are imported directly where needed to avoid circular imports

__all__ = [
    "create_access_token",
    "create_refresh_token",
    "verify_token",
    "TokenPayload",
    "APIException",
    "ValidationError",
    "NotFoundError",
    "UnauthorizedError",
    "ForbiddenError",
    "ConflictError",
    "BadRequestError",
    "InvalidCredentialsError",
    "TokenExpiredError",
    "InvalidTokenError",
    "InactiveUserError",
    "InsufficientPermissionsError",
    "DuplicateResourceError",
    "slugify",
    "unique_slug",
    "TaggedCache",
    "sitemap_cache",
    "revalidate_tag",
]
