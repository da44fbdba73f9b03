"""
Service layer: access-checked collection operations and lifecycle hooks.
"""

from noticeboard.services.base import CollectionService
from noticeboard.services.auth import AuthService
from noticeboard.services.user import UserService
from noticeboard.services.media import MediaService
from noticeboard.services.property import PropertyService
from noticeboard.services.content import (
    PropertyTypeService,
    CategoryService,
    FAQService,
    KnowledgeBaseService,
)
from noticeboard.services.neighborhood import NeighborhoodService
from noticeboard.services.amenity import AmenityService
from noticeboard.services.inquiry import InquiryService
from noticeboard.services.verification import VerificationRequestService
from noticeboard.services.sitemap import SitemapService
from noticeboard.services.dashboard import DashboardService

__all__ = [
    "CollectionService",
    "AuthService",
    "UserService",
    "MediaService",
    "PropertyService",
    "PropertyTypeService",
    "CategoryService",
    "FAQService",
    "KnowledgeBaseService",
    "NeighborhoodService",
    "AmenityService",
    "InquiryService",
    "VerificationRequestService",
    "SitemapService",
    "DashboardService",
]
