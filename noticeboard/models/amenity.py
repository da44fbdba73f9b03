"""
Amenity model: a feature a listing can offer (parking, borehole, security...).
"""

from sqlalchemy import String, Text, JSON, Enum as SQLEnum, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from noticeboard.database import Base
from noticeboard.models.user import enum_values
import enum
import uuid
from typing import List, Optional


class AmenityCategory(str, enum.Enum):
    BASIC = "basic"
    COMFORT = "comfort"
    SECURITY = "security"
    RECREATION = "recreation"
    BUSINESS = "business"
    UTILITIES = "utilities"
    TRANSPORTATION = "transportation"
    ENVIRONMENTAL = "environmental"


class Amenity(Base):
    """
    Amenity that listings may reference.
    ``property_types`` lists the property categories it applies to.
    """

    __tablename__ = "amenities"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    category: Mapped[AmenityCategory] = mapped_column(
        SQLEnum(AmenityCategory, name="amenity_category", values_callable=enum_values),
        nullable=False,
        index=True
    )

    property_types: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Property category values this amenity applies to"
    )

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    icon_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("media.id", ondelete="RESTRICT"),
        nullable=False,
        comment="Uploaded icon image"
    )

    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)

    def applies_to(self, property_type: str) -> bool:
        return property_type in (self.property_types or [])

    def __repr__(self) -> str:
        return f"<Amenity(name={self.name}, category={self.category})>"
