"""
Neighborhoods collection.
"""

from typing import Any, Dict
from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.models.neighborhood import Neighborhood
from noticeboard.repositories.neighborhood import NeighborhoodRepository
from noticeboard.services.content import SlugCollectionService


class NeighborhoodService(SlugCollectionService[Neighborhood]):
    """
    Anyone reads neighborhoods; signed-in users maintain them.
    Slugs combine name and city, so "Centre Ville" exists once per city.
    """

    resource_name = "Neighborhood"

    def __init__(self, db: AsyncSession):
        super().__init__(NeighborhoodRepository(db))

    def _slug_base(self, data: Dict[str, Any]) -> str:
        return f"{data.get('name') or ''} {data.get('city') or ''}"
