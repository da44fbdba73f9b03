"""
Amenity repository.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from noticeboard.repositories.content import SlugRepository
from noticeboard.models.amenity import Amenity
from typing import List, Sequence
import uuid


class AmenityRepository(SlugRepository[Amenity]):

    def __init__(self, db: AsyncSession):
        super().__init__(Amenity, db)

    async def get_many(self, ids: Sequence[uuid.UUID]) -> List[Amenity]:
        """Amenities with the given IDs; unknown IDs are left out."""
        if not ids:
            return []
        return await self.find(where=[Amenity.id.in_(ids)], limit=None)
