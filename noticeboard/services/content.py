"""
Services for slug-addressed collections: property types, categories,
FAQs and knowledge-base articles.
"""

from typing import Any, Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.access import anyone, authenticated, ensure_allowed
from noticeboard.models.content import PropertyType, Category, FAQ, KnowledgeBaseArticle
from noticeboard.models.user import User
from noticeboard.repositories.base import ModelType
from noticeboard.repositories.content import (
    SlugRepository,
    PropertyTypeRepository,
    CategoryRepository,
    FAQRepository,
    KnowledgeBaseRepository,
)
from noticeboard.services.base import CollectionService
from noticeboard.services.sitemap import sitemap_tag
from noticeboard.utils.cache import revalidate_tag
from noticeboard.utils.exceptions import DuplicateResourceError, NotFoundError
from noticeboard.utils.slug import slugify, unique_slug
import logging

logger = logging.getLogger(__name__)


class SlugCollectionService(CollectionService[ModelType]):
    """
    Collection whose documents carry a unique slug.

    A missing slug is derived from ``slug_source`` with a numeric suffix on
    collision; an explicit slug is normalized and must be free. When
    ``sitemap_section`` is set, every change invalidates that sitemap.
    """

    slug_source: str = "title"
    sitemap_section: Optional[str] = None

    read_access = staticmethod(anyone)
    create_access = staticmethod(authenticated)
    update_access = staticmethod(authenticated)
    delete_access = staticmethod(authenticated)

    repository: SlugRepository[ModelType]

    async def _explicit_slug(self, value: str, current_id=None) -> str:
        slug = slugify(value)
        existing = await self.repository.get_by_slug(slug)
        if existing is not None and existing.id != current_id:
            raise DuplicateResourceError(self.resource_name, slug)
        return slug

    def _slug_base(self, data: Dict[str, Any]) -> str:
        return data.get(self.slug_source) or ""

    async def before_create(self, data: Dict[str, Any], user: Optional[User]) -> Dict[str, Any]:
        if data.get("slug"):
            data["slug"] = await self._explicit_slug(data["slug"])
        else:
            data["slug"] = await unique_slug(
                slugify(self._slug_base(data)),
                self.repository.slug_exists,
                fallback=self.resource_name.lower().replace(" ", "-")
            )
        return data

    async def before_update(self, obj: ModelType, data: Dict[str, Any], user: Optional[User]) -> Dict[str, Any]:
        if data.get("slug"):
            data["slug"] = await self._explicit_slug(data["slug"], current_id=obj.id)
        elif "slug" in data:
            # Clearing the slug is not allowed; keep the current one
            data.pop("slug")
        return data

    async def get_by_slug(self, slug: str, user: Optional[User]) -> ModelType:
        access = ensure_allowed(self.read_access(user), user, f"read {self._action_name}")
        obj = await self.repository.get_by_slug(slug, access)
        if obj is None:
            raise NotFoundError(self.resource_name, slug)
        return obj

    def revalidate(self) -> None:
        if self.sitemap_section:
            logger.info(f"Revalidating {sitemap_tag(self.sitemap_section)}")
            revalidate_tag(sitemap_tag(self.sitemap_section))

    async def after_change(self, obj: ModelType, previous: Optional[Dict[str, Any]], operation: str) -> None:
        self.revalidate()

    async def after_delete(self, obj: ModelType) -> None:
        self.revalidate()


class PropertyTypeService(SlugCollectionService[PropertyType]):
    resource_name = "Property type"
    slug_source = "name"

    def __init__(self, db: AsyncSession):
        super().__init__(PropertyTypeRepository(db))


class CategoryService(SlugCollectionService[Category]):
    resource_name = "Category"
    sitemap_section = "categories"

    def __init__(self, db: AsyncSession):
        super().__init__(CategoryRepository(db))


class FAQService(SlugCollectionService[FAQ]):
    resource_name = "FAQ"
    slug_source = "question"
    sitemap_section = "faqs"

    def __init__(self, db: AsyncSession):
        super().__init__(FAQRepository(db))


class KnowledgeBaseService(SlugCollectionService[KnowledgeBaseArticle]):
    resource_name = "Knowledge base article"
    sitemap_section = "knowledge-base"

    def __init__(self, db: AsyncSession):
        super().__init__(KnowledgeBaseRepository(db))
