"""
Pydantic schemas for amenities.
"""

from pydantic import BaseModel, Field
from typing import List, Optional
import uuid
from noticeboard.models.amenity import AmenityCategory
from noticeboard.models.property import PropertyCategory
from noticeboard.schemas.content import DocumentResponse


class AmenityCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Borehole"])
    category: AmenityCategory = Field(..., examples=["utilities"])
    property_types: List[PropertyCategory] = Field(
        ...,
        min_length=1,
        description="Property categories this amenity applies to",
        examples=[["residential", "commercial"]]
    )
    description: Optional[str] = None
    icon_id: uuid.UUID = Field(..., description="Uploaded icon image")
    slug: Optional[str] = Field(None, max_length=255)


class AmenityUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[AmenityCategory] = None
    property_types: Optional[List[PropertyCategory]] = Field(None, min_length=1)
    description: Optional[str] = None
    icon_id: Optional[uuid.UUID] = None
    slug: Optional[str] = Field(None, max_length=255)


class AmenityResponse(DocumentResponse):
    name: str
    category: AmenityCategory
    property_types: List[PropertyCategory]
    description: Optional[str] = None
    icon_id: uuid.UUID
