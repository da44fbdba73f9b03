"""
Pydantic schemas for user requests and responses.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
import uuid
from noticeboard.models.user import UserRole, VerificationStatus


def _check_password_strength(v: str) -> str:
    has_letter = any(c.isalpha() for c in v)
    has_number = any(c.isdigit() for c in v)

    if not has_letter:
        raise ValueError("Password must contain at least one letter")

    if not has_number:
        raise ValueError("Password must contain at least one number")

    return v


class UserCreate(BaseModel):
    """Schema for registering a new user."""

    email: EmailStr = Field(..., description="User's email address", examples=["owner@example.com"])

    password: str = Field(
        ...,
        min_length=8,
        max_length=128,
        description="User's password (minimum 8 characters)",
        examples=["securepassword123"]
    )

    name: str = Field(..., min_length=1, max_length=255, description="Display name", examples=["Jane Doe"])

    phone: Optional[str] = Field(None, max_length=50)

    address: Optional[str] = Field(None)

    role: Optional[UserRole] = Field(None, description="User's role (admin only)")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.lower().strip()

    @field_validator("name")
    @classmethod
    def strip_name(cls, v):
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        return _check_password_strength(v)


class UserUpdate(BaseModel):
    """Schema for updating a user; fields left out are unchanged."""

    email: Optional[EmailStr] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    password: Optional[str] = Field(None, min_length=8, max_length=128)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None

    role: Optional[UserRole] = Field(None, description="User's role (admin only)")
    verification_status: Optional[VerificationStatus] = Field(None, description="Admin only")
    is_active: Optional[bool] = Field(None, description="Whether the account is active (admin only)")

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        if v is None:
            return v
        return _check_password_strength(v)


class UserResponse(BaseModel):
    """Public representation of a user."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    email: str
    name: str
    role: UserRole
    verification_status: VerificationStatus
    phone: Optional[str] = None
    address: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
