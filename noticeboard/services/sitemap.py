"""
Sitemap generation for published content.

Each section queries its collection as an anonymous visitor would, keeps only
documents with a slug, and caches the resulting entries under the section's
tag until content changes invalidate it.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence, Tuple, Type
from xml.etree import ElementTree as ET
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from noticeboard.access import AccessPredicate, anyone, properties_read
from noticeboard.config import settings
from noticeboard.database import Base
from noticeboard.models.content import Category, FAQ, KnowledgeBaseArticle
from noticeboard.models.property import Property, PropertyStatus
from noticeboard.repositories.base import BaseRepository
from noticeboard.schemas.sitemap import SitemapEntry
from noticeboard.utils.cache import TaggedCache, sitemap_cache
import logging

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def sitemap_tag(section: str) -> str:
    return f"{section}-sitemap"


@dataclass(eq=False)
class SitemapSection:
    """A public URL prefix backed by one collection."""

    name: str
    model: Type[Base]
    read_access: AccessPredicate
    published: Sequence[ColumnElement[bool]] = field(default_factory=tuple)

    @property
    def tag(self) -> str:
        return sitemap_tag(self.name)


SECTIONS = {
    section.name: section
    for section in (
        SitemapSection("categories", Category, anyone),
        SitemapSection("faqs", FAQ, anyone, (FAQ.published.is_(True),)),
        SitemapSection(
            "knowledge-base",
            KnowledgeBaseArticle,
            anyone,
            (KnowledgeBaseArticle.published.is_(True),)
        ),
        SitemapSection(
            "properties",
            Property,
            properties_read,
            (Property.status == PropertyStatus.APPROVED,)
        ),
    )
}


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive timestamps; they are stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def build_sitemap_entries(
    rows: Iterable[Tuple[Optional[str], Optional[datetime]]],
    base_url: str,
    section: str,
    now: datetime
) -> List[SitemapEntry]:
    """
    Map (slug, updated_at) rows to sitemap entries.

    Rows without a slug are dropped; rows without ``updated_at`` use ``now``.
    """
    return [
        SitemapEntry(
            loc=f"{base_url}/{section}/{slug}",
            lastmod=_as_utc(updated_at) if updated_at else now
        )
        for slug, updated_at in rows
        if slug
    ]


def format_lastmod(value: datetime) -> str:
    return _as_utc(value).isoformat(timespec="seconds").replace("+00:00", "Z")


def render_sitemap(entries: Iterable[SitemapEntry]) -> str:
    """Serialize entries as a sitemaps.org urlset document."""
    urlset = ET.Element("urlset", {"xmlns": SITEMAP_NAMESPACE})
    for entry in entries:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = entry.loc
        ET.SubElement(url, "lastmod").text = format_lastmod(entry.lastmod)
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(urlset, encoding="unicode")


def render_robots_txt(base_url: Optional[str] = None) -> str:
    """robots.txt with the crawl policy, host and every sitemap URL."""
    base_url = base_url or settings.site_url
    lines = ["# *", "User-agent: *"]
    lines += [f"Disallow: {path}" for path in settings.robots_disallow]
    lines += ["", "# Host", f"Host: {base_url}", "", "# Sitemaps"]
    lines += [f"Sitemap: {base_url}/{name}" for name in settings.additional_sitemaps]
    return "\n".join(lines) + "\n"


class SitemapService:
    """Loads and caches sitemap entries per section."""

    def __init__(self, db: AsyncSession, cache: Optional[TaggedCache] = None):
        self.db = db
        self.cache = cache or sitemap_cache

    async def _load(self, section: SitemapSection) -> List[SitemapEntry]:
        repository = BaseRepository(section.model, self.db)
        rows = await repository.find_columns(
            [section.model.slug, section.model.updated_at],
            where=section.published,
            access=section.read_access(None),
            limit=settings.sitemap_max_records
        )

        entries = build_sitemap_entries(
            rows,
            settings.site_url,
            section.name,
            datetime.now(timezone.utc)
        )
        logger.info(f"Generated {section.tag} with {len(entries)} entries")
        return entries

    async def get_entries(self, section_name: str) -> List[SitemapEntry]:
        """
        Cached entries for a section.

        Raises:
            KeyError: If the section is unknown
        """
        section = SECTIONS[section_name]
        return await self.cache.get_or_set(
            section.tag,
            lambda: self._load(section),
            tags=[section.tag]
        )

    async def render(self, section_name: str) -> str:
        return render_sitemap(await self.get_entries(section_name))
