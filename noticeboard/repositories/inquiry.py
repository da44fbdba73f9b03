"""
Inquiry repository.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from noticeboard.repositories.base import BaseRepository
from noticeboard.models.inquiry import Inquiry


class InquiryRepository(BaseRepository[Inquiry]):

    def __init__(self, db: AsyncSession):
        super().__init__(Inquiry, db)
