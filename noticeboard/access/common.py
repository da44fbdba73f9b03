"""Role-only predicates shared by several collections."""

from typing import Optional

from noticeboard.models.user import User


def anyone(user: Optional[User]) -> bool:
    return True


def authenticated(user: Optional[User]) -> bool:
    return user is not None


def admin(user: Optional[User]) -> bool:
    return user is not None and user.is_admin


def verified(user: Optional[User]) -> bool:
    """Only users whose identity verification was approved."""
    return user is not None and user.is_verified


def verified_or_admin(user: Optional[User]) -> bool:
    return user is not None and (user.is_admin or user.is_verified)
