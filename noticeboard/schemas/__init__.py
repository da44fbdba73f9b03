"""
Pydantic schemas for request/response validation.
"""

from .common import Page, paginate, SuccessResponse, ErrorMessage
from .auth import LoginRequest, TokenResponse, RefreshTokenRequest, AccessTokenResponse, LoginResponse
from .user import UserCreate, UserUpdate, UserResponse
from .media import MediaUpdate, MediaResponse
from .property import PropertyCreate, PropertyUpdate, PropertyReview, PropertyResponse
from .content import (
    PropertyTypeCreate,
    PropertyTypeUpdate,
    PropertyTypeResponse,
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    FAQCreate,
    FAQUpdate,
    FAQResponse,
    KnowledgeBaseCreate,
    KnowledgeBaseUpdate,
    KnowledgeBaseResponse,
)
from .neighborhood import NeighborhoodCreate, NeighborhoodUpdate, NeighborhoodResponse
from .amenity import AmenityCreate, AmenityUpdate, AmenityResponse
from .inquiry import InquiryCreate, InquiryUpdate, InquiryResponse
from .verification import VerificationRequestCreate, VerificationRequestUpdate, VerificationRequestResponse
from .sitemap import SitemapEntry
from .dashboard import DashboardStats

__all__ = [
    "Page",
    "paginate",
    "SuccessResponse",
    "ErrorMessage",
    "LoginRequest",
    "TokenResponse",
    "RefreshTokenRequest",
    "AccessTokenResponse",
    "LoginResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "MediaUpdate",
    "MediaResponse",
    "PropertyCreate",
    "PropertyUpdate",
    "PropertyReview",
    "PropertyResponse",
    "PropertyTypeCreate",
    "PropertyTypeUpdate",
    "PropertyTypeResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "FAQCreate",
    "FAQUpdate",
    "FAQResponse",
    "KnowledgeBaseCreate",
    "KnowledgeBaseUpdate",
    "KnowledgeBaseResponse",
    "NeighborhoodCreate",
    "NeighborhoodUpdate",
    "NeighborhoodResponse",
    "AmenityCreate",
    "AmenityUpdate",
    "AmenityResponse",
    "InquiryCreate",
    "InquiryUpdate",
    "InquiryResponse",
    "VerificationRequestCreate",
    "VerificationRequestUpdate",
    "VerificationRequestResponse",
    "SitemapEntry",
    "DashboardStats",
]
