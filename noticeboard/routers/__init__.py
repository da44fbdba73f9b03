"""
API route handlers for the Notice Board API.
"""

from .auth import router as auth_router
from .users import router as users_router
from .media import router as media_router
from .properties import router as properties_router
from .content import (
    property_types_router,
    categories_router,
    faqs_router,
    knowledge_base_router,
    neighborhoods_router,
    amenities_router
)
from .inquiries import router as inquiries_router
from .verification_requests import router as verification_requests_router
from .sitemaps import router as sitemaps_router
from .dashboard import router as dashboard_router

# Mounted under the versioned API prefix
api_routers = [
    auth_router,
    users_router,
    media_router,
    properties_router,
    property_types_router,
    categories_router,
    faqs_router,
    knowledge_base_router,
    neighborhoods_router,
    amenities_router,
    inquiries_router,
]

__all__ = [
    "api_routers",
    "auth_router",
    "users_router",
    "media_router",
    "properties_router",
    "property_types_router",
    "categories_router",
    "faqs_router",
    "knowledge_base_router",
    "neighborhoods_router",
    "amenities_router",
    "inquiries_router",
    "verification_requests_router",
    "sitemaps_router",
    "dashboard_router",
]
