"""
Media repository for uploaded file metadata.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from noticeboard.access import AccessResult
from noticeboard.repositories.base import BaseRepository
from noticeboard.models.media import Media
from typing import List, Sequence
import uuid


class MediaRepository(BaseRepository[Media]):

    def __init__(self, db: AsyncSession):
        super().__init__(Media, db)

    async def get_many(self, ids: Sequence[uuid.UUID], access: AccessResult = True) -> List[Media]:
        """Files with the given IDs visible through ``access``; others are left out."""
        if not ids:
            return []
        return await self.find(where=[Media.id.in_(ids)], access=access, limit=None)
