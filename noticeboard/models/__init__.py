"""
Database models for the Real Notice Board API.
"""

from noticeboard.models.user import User, UserRole, VerificationStatus
from noticeboard.models.media import Media
from noticeboard.models.neighborhood import Neighborhood, CameroonRegion
from noticeboard.models.amenity import Amenity, AmenityCategory
from noticeboard.models.property import Property, PropertyCategory, ListingType, PropertyStatus
from noticeboard.models.content import PropertyType, Category, FAQ, KnowledgeBaseArticle, ContentPriority
from noticeboard.models.inquiry import Inquiry, InquiryType, ContactPreference, InquiryStatus
from noticeboard.models.verification_request import VerificationRequest, ReviewStatus
from noticeboard.models.bootstrap import BootstrapClaim, FIRST_ADMIN_CLAIM

__all__ = [
    "User",
    "UserRole",
    "VerificationStatus",
    "Media",
    "Neighborhood",
    "CameroonRegion",
    "Amenity",
    "AmenityCategory",
    "Property",
    "PropertyCategory",
    "ListingType",
    "PropertyStatus",
    "PropertyType",
    "Category",
    "FAQ",
    "KnowledgeBaseArticle",
    "ContentPriority",
    "Inquiry",
    "InquiryType",
    "ContactPreference",
    "InquiryStatus",
    "VerificationRequest",
    "ReviewStatus",
    "BootstrapClaim",
    "FIRST_ADMIN_CLAIM",
]
