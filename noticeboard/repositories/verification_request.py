"""
Verification request repository.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from noticeboard.repositories.base import BaseRepository
from noticeboard.models.verification_request import VerificationRequest
from typing import Optional
import uuid
import logging

logger = logging.getLogger(__name__)


class VerificationRequestRepository(BaseRepository[VerificationRequest]):
    """Each user has at most one verification request."""

    def __init__(self, db: AsyncSession):
        super().__init__(VerificationRequest, db)

    async def get_by_user(self, user_id: uuid.UUID) -> Optional[VerificationRequest]:
        return await self.get_by_field("user_id", user_id)
