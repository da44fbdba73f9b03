"""
Repositories for editorial collections addressed by slug.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from noticeboard.access import AccessResult
from noticeboard.repositories.base import BaseRepository, ModelType
from noticeboard.models.content import PropertyType, Category, FAQ, KnowledgeBaseArticle
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class SlugRepository(BaseRepository[ModelType]):
    """Repository for models with a unique ``slug`` column."""

    async def get_by_slug(self, slug: str, access: AccessResult = True) -> Optional[ModelType]:
        records = await self.find(where=[self.model.slug == slug], access=access, limit=1)
        return records[0] if records else None

    async def slug_exists(self, slug: str) -> bool:
        result = await self.db.execute(
            select(func.count(self.model.id)).where(self.model.slug == slug)
        )
        return result.scalar() > 0


class PropertyTypeRepository(SlugRepository[PropertyType]):

    def __init__(self, db: AsyncSession):
        super().__init__(PropertyType, db)


class CategoryRepository(SlugRepository[Category]):

    def __init__(self, db: AsyncSession):
        super().__init__(Category, db)


class FAQRepository(SlugRepository[FAQ]):

    def __init__(self, db: AsyncSession):
        super().__init__(FAQ, db)


class KnowledgeBaseRepository(SlugRepository[KnowledgeBaseArticle]):

    def __init__(self, db: AsyncSession):
        super().__init__(KnowledgeBaseArticle, db)

