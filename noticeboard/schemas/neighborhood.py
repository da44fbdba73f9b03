"""
Pydantic schemas for neighborhoods.
"""

from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal
from noticeboard.models.neighborhood import CameroonRegion
from noticeboard.schemas.content import DocumentResponse


class NeighborhoodCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Bastos"])
    city: str = Field(..., min_length=1, max_length=255, examples=["Yaoundé"])
    region: CameroonRegion = Field(..., examples=["centre"])
    description: Optional[str] = None
    latitude: Optional[Decimal] = Field(None, ge=-90, le=90)
    longitude: Optional[Decimal] = Field(None, ge=-180, le=180)
    slug: Optional[str] = Field(None, max_length=255, description="Generated from name and city when omitted")


class NeighborhoodUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    city: Optional[str] = Field(None, min_length=1, max_length=255)
    region: Optional[CameroonRegion] = None
    description: Optional[str] = None
    latitude: Optional[Decimal] = Field(None, ge=-90, le=90)
    longitude: Optional[Decimal] = Field(None, ge=-180, le=180)
    slug: Optional[str] = Field(None, max_length=255)


class NeighborhoodResponse(DocumentResponse):
    name: str
    city: str
    region: CameroonRegion
    description: Optional[str] = None
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None
