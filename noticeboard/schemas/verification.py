"""
Pydantic schemas for identity verification requests.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
import uuid
from noticeboard.models.verification_request import ReviewStatus


class VerificationRequestCreate(BaseModel):
    """Documents submitted for review; name and email come from the account."""

    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    identification_document_id: uuid.UUID = Field(..., description="Media ID of the ID card or passport")
    selfie_with_id_id: uuid.UUID = Field(..., description="Media ID of a selfie holding the document")


class VerificationRequestUpdate(BaseModel):
    """Admin review of a request."""

    status: Optional[ReviewStatus] = None
    admin_notes: Optional[str] = Field(None, description="Visible to the user if rejected")


class VerificationRequestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    user_name: str
    user_email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    identification_document_id: uuid.UUID
    selfie_with_id_id: uuid.UUID
    status: ReviewStatus
    admin_notes: Optional[str] = None
    submitted_at: Optional[datetime] = None
    reviewed_at: Optional[datetime] = None
    reviewed_by_id: Optional[uuid.UUID] = None
    created_at: datetime
    updated_at: datetime
