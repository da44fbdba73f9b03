"""
Property model for sale and rental listings.
Listings are reviewed by an administrator before they become public.
"""

from sqlalchemy import String, Text, Numeric, Boolean, Enum as SQLEnum, Index, ForeignKey, Uuid, Table, Column
from sqlalchemy.orm import Mapped, mapped_column, relationship
from noticeboard.database import Base
from noticeboard.models.user import enum_values
from decimal import Decimal
import enum
import uuid
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from noticeboard.models.amenity import Amenity
    from noticeboard.models.media import Media


class PropertyCategory(str, enum.Enum):
    """Kind of real estate being listed."""
    LAND = "land"
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"


class ListingType(str, enum.Enum):
    SALE = "sale"
    RENT = "rent"


class PropertyStatus(str, enum.Enum):
    """Admin review status of a listing."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SOLD = "sold"


# Gallery images of a listing
property_images = Table(
    "property_images",
    Base.metadata,
    Column("property_id", Uuid, ForeignKey("properties.id", ondelete="CASCADE"), primary_key=True),
    Column("media_id", Uuid, ForeignKey("media.id", ondelete="CASCADE"), primary_key=True),
)

property_amenities = Table(
    "property_amenities",
    Base.metadata,
    Column("property_id", Uuid, ForeignKey("properties.id", ondelete="CASCADE"), primary_key=True),
    Column("amenity_id", Uuid, ForeignKey("amenities.id", ondelete="CASCADE"), primary_key=True),
)


class Property(Base):
    """
    Property listing owned by a user.
    Only approved listings are visible to the public and in the sitemap.
    """

    __tablename__ = "properties"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Property listing title"
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Detailed property description"
    )

    property_type: Mapped[PropertyCategory] = mapped_column(
        SQLEnum(PropertyCategory, name="property_category", values_callable=enum_values),
        nullable=False,
        index=True
    )

    listing_type: Mapped[ListingType] = mapped_column(
        SQLEnum(ListingType, name="listing_type", values_callable=enum_values),
        nullable=False,
        index=True
    )

    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=14, scale=2),
        nullable=False,
        index=True,
        comment="Price in XAF"
    )

    area: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=False,
        comment="Area in square meters"
    )

    address: Mapped[str] = mapped_column(Text, nullable=False)

    latitude: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(precision=10, scale=8),
        nullable=True
    )

    longitude: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(precision=11, scale=8),
        nullable=True
    )

    status: Mapped[PropertyStatus] = mapped_column(
        SQLEnum(PropertyStatus, name="property_status", values_callable=enum_values),
        nullable=False,
        default=PropertyStatus.PENDING,
        index=True,
        comment="Admin approval status"
    )

    featured: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Featured on the homepage"
    )

    admin_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    slug: Mapped[Optional[str]] = mapped_column(
        String(255),
        unique=True,
        nullable=True,
        index=True,
        comment="URL slug used for routing"
    )

    owner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the user who owns this listing"
    )

    neighborhood_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("neighborhoods.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )

    # Relationships
    images: Mapped[List["Media"]] = relationship(
        "Media",
        secondary=property_images,
        lazy="selectin",
        order_by="Media.created_at.asc()"
    )

    amenities: Mapped[List["Amenity"]] = relationship(
        "Amenity",
        secondary=property_amenities,
        lazy="selectin",
        order_by="Amenity.name"
    )

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, title={self.title[:30]}, status={self.status})>"

    @property
    def is_approved(self) -> bool:
        return self.status == PropertyStatus.APPROVED


# Public listing queries filter on status and sort by recency
status_updated_index = Index(
    "idx_properties_status_updated",
    Property.status,
    Property.updated_at.desc()
)

owner_status_index = Index(
    "idx_properties_owner_status",
    Property.owner_id,
    Property.status
)
