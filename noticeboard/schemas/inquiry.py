"""
Pydantic schemas for inquiries.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional
from decimal import Decimal
from datetime import datetime
import uuid
from noticeboard.models.inquiry import InquiryType, ContactPreference, InquiryStatus


class InquiryCreate(BaseModel):
    property_id: uuid.UUID
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    inquiry_type: InquiryType = InquiryType.GENERAL
    contact_preference: ContactPreference = ContactPreference.EMAIL
    contact_phone: Optional[str] = Field(None, max_length=50)
    contact_email: Optional[str] = Field(None, max_length=255)
    offer_amount: Optional[Decimal] = Field(None, gt=0, max_digits=14, decimal_places=2)

    @model_validator(mode="after")
    def check_offer(self):
        if self.inquiry_type == InquiryType.OFFER and self.offer_amount is None:
            raise ValueError("An offer requires offer_amount")
        return self


class InquiryUpdate(BaseModel):
    status: Optional[InquiryStatus] = None
    response: Optional[str] = None
    response_date: Optional[datetime] = None


class InquiryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    property_id: uuid.UUID
    inquirer_id: uuid.UUID
    subject: str
    message: str
    inquiry_type: InquiryType
    contact_preference: ContactPreference
    contact_phone: Optional[str] = None
    contact_email: Optional[str] = None
    offer_amount: Optional[Decimal] = None
    status: InquiryStatus
    response: Optional[str] = None
    response_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
