"""
Access predicates for every collection.

A predicate receives the requesting user (``None`` when anonymous) and returns
``True`` (unrestricted), ``False`` (denied) or a SQLAlchemy boolean clause that
restricts which rows the requester may see or change.
"""

from noticeboard.access.base import AccessResult, AccessPredicate, as_clause, access_denied, ensure_allowed
from noticeboard.access.common import anyone, authenticated, admin, verified, verified_or_admin
from noticeboard.access.media import media_read, media_update, media_delete
from noticeboard.access.properties import properties_read, properties_update, properties_delete
from noticeboard.access.users import users_update
from noticeboard.access.inquiries import inquiries_delete
from noticeboard.access.verification_requests import verification_requests_read

__all__ = [
    "AccessResult",
    "AccessPredicate",
    "access_denied",
    "as_clause",
    "ensure_allowed",
    "anyone",
    "authenticated",
    "admin",
    "verified",
    "verified_or_admin",
    "media_read",
    "media_update",
    "media_delete",
    "properties_read",
    "properties_update",
    "properties_delete",
    "users_update",
    "inquiries_delete",
    "verification_requests_read",
]
