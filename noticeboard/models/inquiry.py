"""
Inquiry model: a message from a user to the owner of a listing.
"""

from sqlalchemy import String, Text, Numeric, DateTime, Enum as SQLEnum, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from noticeboard.database import Base
from noticeboard.models.user import enum_values
from datetime import datetime
from decimal import Decimal
import enum
import uuid
from typing import Optional


class InquiryType(str, enum.Enum):
    GENERAL = "general"
    VIEWING = "viewing"
    OFFER = "offer"
    DETAILS = "details"


class ContactPreference(str, enum.Enum):
    EMAIL = "email"
    PHONE = "phone"
    WHATSAPP = "whatsapp"


class InquiryStatus(str, enum.Enum):
    NEW = "new"
    IN_PROGRESS = "in-progress"
    RESPONDED = "responded"
    CLOSED = "closed"


class Inquiry(Base):
    """Inquiry about a property, sent by an authenticated user."""

    __tablename__ = "inquiries"

    property_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    inquirer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    subject: Mapped[str] = mapped_column(String(255), nullable=False)

    message: Mapped[str] = mapped_column(Text, nullable=False)

    inquiry_type: Mapped[InquiryType] = mapped_column(
        SQLEnum(InquiryType, name="inquiry_type", values_callable=enum_values),
        nullable=False
    )

    contact_preference: Mapped[ContactPreference] = mapped_column(
        SQLEnum(ContactPreference, name="contact_preference", values_callable=enum_values),
        nullable=False
    )

    contact_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    contact_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    offer_amount: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(precision=14, scale=2),
        nullable=True,
        comment="Only meaningful for offers"
    )

    status: Mapped[InquiryStatus] = mapped_column(
        SQLEnum(InquiryStatus, name="inquiry_status", values_callable=enum_values),
        nullable=False,
        default=InquiryStatus.NEW,
        index=True
    )

    response: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    response_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
