"""Verification request access: users see their own request, admins see all."""

from typing import Optional

from noticeboard.access.base import AccessResult
from noticeboard.models.user import User
from noticeboard.models.verification_request import VerificationRequest


def verification_requests_read(user: Optional[User]) -> AccessResult:
    if user is None:
        return False
    if user.is_admin:
        return True
    return VerificationRequest.user_id == user.id
