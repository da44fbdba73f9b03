"""
Repository layer for data access operations.
Every query accepts an access result produced by the collection's predicates.
"""

from noticeboard.repositories.base import BaseRepository
from noticeboard.repositories.user import UserRepository
from noticeboard.repositories.media import MediaRepository
from noticeboard.repositories.property import PropertyRepository, PropertySearchFilters
from noticeboard.repositories.content import (
    SlugRepository,
    PropertyTypeRepository,
    CategoryRepository,
    FAQRepository,
    KnowledgeBaseRepository,
)
from noticeboard.repositories.neighborhood import NeighborhoodRepository
from noticeboard.repositories.amenity import AmenityRepository
from noticeboard.repositories.inquiry import InquiryRepository
from noticeboard.repositories.verification_request import VerificationRequestRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "MediaRepository",
    "PropertyRepository",
    "PropertySearchFilters",
    "SlugRepository",
    "PropertyTypeRepository",
    "CategoryRepository",
    "FAQRepository",
    "KnowledgeBaseRepository",
    "NeighborhoodRepository",
    "AmenityRepository",
    "InquiryRepository",
    "VerificationRequestRepository",
]
