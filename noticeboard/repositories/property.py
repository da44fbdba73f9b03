"""
Property repository for listings with search and filtering.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import or_
from sqlalchemy.sql.elements import ColumnElement
from noticeboard.repositories.content import SlugRepository
from noticeboard.models.amenity import Amenity
from noticeboard.models.property import Property, PropertyCategory, ListingType, PropertyStatus
from typing import Optional, List
from decimal import Decimal
import uuid
import logging

logger = logging.getLogger(__name__)


class PropertySearchFilters:
    """Data class for property search filters."""

    def __init__(
        self,
        search_text: Optional[str] = None,
        property_type: Optional[PropertyCategory] = None,
        listing_type: Optional[ListingType] = None,
        status: Optional[PropertyStatus] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
        min_area: Optional[Decimal] = None,
        max_area: Optional[Decimal] = None,
        owner_id: Optional[uuid.UUID] = None,
        featured: Optional[bool] = None,
        neighborhood_id: Optional[uuid.UUID] = None,
        amenity_id: Optional[uuid.UUID] = None
    ):
        self.search_text = search_text
        self.property_type = property_type
        self.listing_type = listing_type
        self.status = status
        self.min_price = min_price
        self.max_price = max_price
        self.min_area = min_area
        self.max_area = max_area
        self.owner_id = owner_id
        self.featured = featured
        self.neighborhood_id = neighborhood_id
        self.amenity_id = amenity_id

    def clauses(self) -> List[ColumnElement[bool]]:
        """Translate the filters into WHERE clauses."""
        conditions: List[ColumnElement[bool]] = []

        if self.search_text:
            term = f"%{self.search_text.strip()}%"
            conditions.append(or_(
                Property.title.ilike(term),
                Property.description.ilike(term),
                Property.address.ilike(term)
            ))

        if self.property_type is not None:
            conditions.append(Property.property_type == self.property_type)

        if self.listing_type is not None:
            conditions.append(Property.listing_type == self.listing_type)

        if self.status is not None:
            conditions.append(Property.status == self.status)

        if self.min_price is not None:
            conditions.append(Property.price >= self.min_price)

        if self.max_price is not None:
            conditions.append(Property.price <= self.max_price)

        if self.min_area is not None:
            conditions.append(Property.area >= self.min_area)

        if self.max_area is not None:
            conditions.append(Property.area <= self.max_area)

        if self.owner_id is not None:
            conditions.append(Property.owner_id == self.owner_id)

        if self.featured is not None:
            conditions.append(Property.featured.is_(self.featured))

        if self.neighborhood_id is not None:
            conditions.append(Property.neighborhood_id == self.neighborhood_id)

        if self.amenity_id is not None:
            conditions.append(Property.amenities.any(Amenity.id == self.amenity_id))

        return conditions


class PropertyRepository(SlugRepository[Property]):
    """
    Repository for property listings.
    Visibility is decided by the access clause passed in by the service layer.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)
