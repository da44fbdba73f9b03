"""
Neighborhood model: the area of a city a listing belongs to.
"""

from sqlalchemy import String, Text, Numeric, Enum as SQLEnum, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from noticeboard.database import Base
from noticeboard.models.user import enum_values
from decimal import Decimal
import enum
from typing import Optional


class CameroonRegion(str, enum.Enum):
    ADAMAWA = "adamawa"
    CENTRE = "centre"
    EAST = "east"
    FAR_NORTH = "far-north"
    LITTORAL = "littoral"
    NORTH = "north"
    NORTHWEST = "northwest"
    SOUTH = "south"
    SOUTHWEST = "southwest"
    WEST = "west"


class Neighborhood(Base):
    """
    Named area of a city.
    A name is unique within its city; the slug combines both.
    """

    __tablename__ = "neighborhoods"
    __table_args__ = (
        UniqueConstraint("name", "city", name="uq_neighborhoods_name_city"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    city: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    region: Mapped[CameroonRegion] = mapped_column(
        SQLEnum(CameroonRegion, name="cameroon_region", values_callable=enum_values),
        nullable=False,
        index=True
    )

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    latitude: Mapped[Optional[Decimal]] = mapped_column(Numeric(precision=10, scale=8), nullable=True)

    longitude: Mapped[Optional[Decimal]] = mapped_column(Numeric(precision=11, scale=8), nullable=True)

    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Neighborhood(name={self.name}, city={self.city})>"
