"""
Identity verification request model.
A user submits identity documents once; resubmissions reuse the same row.
"""

from sqlalchemy import String, Text, DateTime, Enum as SQLEnum, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from noticeboard.database import Base
from noticeboard.models.user import enum_values
from datetime import datetime
import enum
import uuid
from typing import Optional


class ReviewStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class VerificationRequest(Base):
    """Identity documents submitted by a user for admin review."""

    __tablename__ = "verification_requests"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True
    )

    user_name: Mapped[str] = mapped_column(String(255), nullable=False)

    user_email: Mapped[str] = mapped_column(String(255), nullable=False)

    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    identification_document_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("media.id", ondelete="RESTRICT"),
        nullable=False,
        comment="ID card, passport or driver's license"
    )

    selfie_with_id_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("media.id", ondelete="RESTRICT"),
        nullable=False,
        comment="Selfie holding the identification document"
    )

    status: Mapped[ReviewStatus] = mapped_column(
        SQLEnum(ReviewStatus, name="review_status", values_callable=enum_values),
        nullable=False,
        default=ReviewStatus.PENDING,
        index=True
    )

    admin_notes: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Visible to the user if rejected"
    )

    submitted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    reviewed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    reviewed_by_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True
    )

    def __repr__(self) -> str:
        return f"<VerificationRequest(id={self.id}, user_id={self.user_id}, status={self.status})>"
