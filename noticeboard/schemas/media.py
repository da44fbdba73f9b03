"""
Pydantic schemas for media.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
import uuid


class MediaUpdate(BaseModel):
    alt: Optional[str] = Field(None, max_length=255, description="Alternative text")
    is_public: Optional[bool] = Field(None, description="Whether anyone may read this file")


class MediaResponse(BaseModel):
    """Metadata of an uploaded file."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    filename: str
    mime_type: str
    file_size: int
    width: Optional[int] = None
    height: Optional[int] = None
    alt: Optional[str] = None
    uploaded_by_id: Optional[uuid.UUID] = None
    is_public: bool
    created_at: datetime
    updated_at: datetime
