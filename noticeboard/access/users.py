"""User access: users update their own profile, admins update anyone."""

from typing import Optional

from sqlalchemy import false

from noticeboard.access.base import AccessResult
from noticeboard.models.user import User


def users_update(user: Optional[User]) -> AccessResult:
    if user is not None and user.is_admin:
        return True
    if user is None:
        return false()
    return User.id == user.id
