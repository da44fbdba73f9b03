"""
Neighborhood repository.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from noticeboard.repositories.content import SlugRepository
from noticeboard.models.neighborhood import Neighborhood


class NeighborhoodRepository(SlugRepository[Neighborhood]):

    def __init__(self, db: AsyncSession):
        super().__init__(Neighborhood, db)
