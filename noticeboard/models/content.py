"""
Editorial content collections: property types, categories, FAQs and
knowledge-base articles. Each document is addressed by a unique slug.
"""

from sqlalchemy import String, Text, Boolean, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column
from noticeboard.database import Base
from noticeboard.models.user import enum_values
import enum
from typing import Optional


class ContentPriority(str, enum.Enum):
    """Ordering hint for FAQ and knowledge-base answers."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class PropertyType(Base):
    """Reference data describing a kind of property (land, residential...)."""

    __tablename__ = "property_types"

    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Brief description of this property type"
    )

    def __repr__(self) -> str:
        return f"<PropertyType(slug={self.slug})>"


class Category(Base):
    """Listing category page."""

    __tablename__ = "categories"

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    slug: Mapped[Optional[str]] = mapped_column(String(255), unique=True, nullable=True, index=True)


class FAQ(Base):
    """Frequently asked question."""

    __tablename__ = "faqs"

    question: Mapped[str] = mapped_column(String(500), nullable=False)

    answer: Mapped[str] = mapped_column(Text, nullable=False)

    category: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="general",
        index=True
    )

    priority: Mapped[ContentPriority] = mapped_column(
        SQLEnum(ContentPriority, name="content_priority", values_callable=enum_values),
        nullable=False,
        default=ContentPriority.MEDIUM
    )

    published: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        index=True,
        comment="Unpublished FAQs are drafts"
    )

    slug: Mapped[Optional[str]] = mapped_column(String(255), unique=True, nullable=True, index=True)


class KnowledgeBaseArticle(Base):
    """Long-form help article."""

    __tablename__ = "knowledge_base"

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    summary: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    category: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="general",
        index=True
    )

    priority: Mapped[ContentPriority] = mapped_column(
        SQLEnum(ContentPriority, name="content_priority", values_callable=enum_values),
        nullable=False,
        default=ContentPriority.MEDIUM
    )

    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    slug: Mapped[Optional[str]] = mapped_column(String(255), unique=True, nullable=True, index=True)
