"""
Dashboard counters.

Administrators see site-wide totals. Other users see their own listings
and the inquiries received on them.
"""

from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from noticeboard.models.inquiry import Inquiry, InquiryStatus
from noticeboard.models.property import Property
from noticeboard.models.user import User
from noticeboard.repositories.inquiry import InquiryRepository
from noticeboard.repositories.property import PropertyRepository
from noticeboard.schemas.dashboard import DashboardStats
import logging

logger = logging.getLogger(__name__)


class DashboardService:

    def __init__(self, db: AsyncSession):
        self.property_repo = PropertyRepository(db)
        self.inquiry_repo = InquiryRepository(db)

    async def stats(self, user: User) -> DashboardStats:
        property_scope: List[ColumnElement[bool]] = []
        inquiry_scope: List[ColumnElement[bool]] = []

        if not user.is_admin:
            property_scope.append(Property.owner_id == user.id)
            inquiry_scope.append(
                Inquiry.property_id.in_(select(Property.id).where(Property.owner_id == user.id))
            )

        stats = DashboardStats(
            total_properties=await self.property_repo.count(where=property_scope),
            total_inquiries=await self.inquiry_repo.count(where=inquiry_scope),
            pending_inquiries=await self.inquiry_repo.count(
                where=[*inquiry_scope, Inquiry.status == InquiryStatus.NEW]
            )
        )
        logger.debug(f"Dashboard stats for user {user.id}: {stats.model_dump()}")
        return stats
