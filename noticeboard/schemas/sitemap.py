"""
Sitemap schemas.
"""

from datetime import datetime
from pydantic import BaseModel, Field


class SitemapEntry(BaseModel):
    """One <url> element of a sitemap."""

    loc: str = Field(..., description="Canonical URL of the page")
    lastmod: datetime = Field(..., description="Last modification time")
