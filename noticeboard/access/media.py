"""Media access: anonymous and public files are readable, owners manage their own."""

from typing import Optional

from sqlalchemy import or_, false

from noticeboard.access.base import AccessResult
from noticeboard.models.media import Media
from noticeboard.models.user import User


def media_read(user: Optional[User]) -> AccessResult:
    # Admins can read any media
    if user is not None and user.is_admin:
        return True

    conditions = [Media.uploaded_by_id.is_(None), Media.is_public.is_(True)]
    if user is not None:
        conditions.append(Media.uploaded_by_id == user.id)
    return or_(*conditions)


def media_update(user: Optional[User]) -> AccessResult:
    if user is not None and user.is_admin:
        return True

    # Users can only update their own media; anonymous requests match nothing
    if user is None:
        return false()
    return Media.uploaded_by_id == user.id


def media_delete(user: Optional[User]) -> AccessResult:
    if user is not None and user.is_admin:
        return True

    if user is None:
        return false()
    return Media.uploaded_by_id == user.id
