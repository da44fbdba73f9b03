"""
Pydantic schemas for property requests and responses.
Handles listing creation, updates, admin review and search filters.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from decimal import Decimal
from datetime import datetime
import uuid
from noticeboard.models.property import PropertyCategory, ListingType, PropertyStatus
from noticeboard.schemas.amenity import AmenityResponse
from noticeboard.schemas.media import MediaResponse


class PropertyBase(BaseModel):
    """Fields shared by listing creation and responses."""

    title: str = Field(
        ...,
        min_length=5,
        max_length=255,
        description="Property listing title",
        examples=["Three-bedroom house in Bastos"]
    )

    description: str = Field(
        ...,
        min_length=10,
        description="Detailed property description"
    )

    property_type: PropertyCategory = Field(..., description="Kind of property", examples=["residential"])

    listing_type: ListingType = Field(..., description="For sale or for rent", examples=["sale"])

    price: Decimal = Field(..., gt=0, max_digits=14, decimal_places=2, description="Price in XAF")

    area: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, description="Area in square meters")

    address: str = Field(..., min_length=3, description="Street address")

    latitude: Optional[Decimal] = Field(None, ge=-90, le=90)

    longitude: Optional[Decimal] = Field(None, ge=-180, le=180)

    @field_validator("title", "address")
    @classmethod
    def strip_text(cls, v):
        if not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()


class PropertyCreate(PropertyBase):
    """Schema for creating a listing. Review fields are admin only."""

    neighborhood_id: Optional[uuid.UUID] = None
    image_ids: Optional[List[uuid.UUID]] = Field(None, description="Uploaded images to show with the listing")
    amenity_ids: Optional[List[uuid.UUID]] = Field(None, description="Amenities; each must apply to the property type")
    slug: Optional[str] = Field(None, max_length=255, description="Generated from the title when omitted")
    status: Optional[PropertyStatus] = Field(None, description="Admin only")
    featured: Optional[bool] = Field(None, description="Admin only")
    admin_notes: Optional[str] = Field(None, description="Admin only")


class PropertyUpdate(BaseModel):
    """Schema for updating a listing; fields left out are unchanged."""

    title: Optional[str] = Field(None, min_length=5, max_length=255)
    description: Optional[str] = Field(None, min_length=10)
    property_type: Optional[PropertyCategory] = None
    listing_type: Optional[ListingType] = None
    price: Optional[Decimal] = Field(None, gt=0, max_digits=14, decimal_places=2)
    area: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    address: Optional[str] = Field(None, min_length=3)
    latitude: Optional[Decimal] = Field(None, ge=-90, le=90)
    longitude: Optional[Decimal] = Field(None, ge=-180, le=180)
    slug: Optional[str] = Field(None, max_length=255)
    neighborhood_id: Optional[uuid.UUID] = None
    image_ids: Optional[List[uuid.UUID]] = Field(None, description="Replaces the listing images")
    amenity_ids: Optional[List[uuid.UUID]] = Field(None, description="Replaces the listing amenities")

    status: Optional[PropertyStatus] = Field(None, description="Admin only")
    featured: Optional[bool] = Field(None, description="Admin only")
    admin_notes: Optional[str] = Field(None, description="Admin only")


class PropertyReview(BaseModel):
    """Admin decision on a listing."""

    status: PropertyStatus
    admin_notes: Optional[str] = None


class PropertyResponse(PropertyBase):
    """Schema for property responses."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    slug: Optional[str] = None
    status: PropertyStatus
    featured: bool
    admin_notes: Optional[str] = None
    owner_id: uuid.UUID
    neighborhood_id: Optional[uuid.UUID] = None
    images: List[MediaResponse] = []
    amenities: List[AmenityResponse] = []
    created_at: datetime
    updated_at: datetime
