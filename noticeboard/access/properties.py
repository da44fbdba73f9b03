"""Property access: the public sees approved listings, owners see and manage their own."""

from typing import Optional

from sqlalchemy import or_, false

from noticeboard.access.base import AccessResult
from noticeboard.models.property import Property, PropertyStatus
from noticeboard.models.user import User


def properties_read(user: Optional[User]) -> AccessResult:
    if user is not None and user.is_admin:
        return True

    if user is not None:
        return or_(Property.owner_id == user.id, Property.status == PropertyStatus.APPROVED)

    return Property.status == PropertyStatus.APPROVED


def properties_update(user: Optional[User]) -> AccessResult:
    if user is not None and user.is_admin:
        return True
    if user is None:
        return false()
    return Property.owner_id == user.id


def properties_delete(user: Optional[User]) -> AccessResult:
    if user is not None and user.is_admin:
        return True
    if user is None:
        return false()
    return Property.owner_id == user.id
