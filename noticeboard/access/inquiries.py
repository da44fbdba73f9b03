"""Inquiry access: only the inquirer (or an admin) can delete an inquiry."""

from typing import Optional

from sqlalchemy import false

from noticeboard.access.base import AccessResult
from noticeboard.models.inquiry import Inquiry
from noticeboard.models.user import User


def inquiries_delete(user: Optional[User]) -> AccessResult:
    if user is not None and user.is_admin:
        return True
    if user is None:
        return false()
    return Inquiry.inquirer_id == user.id
