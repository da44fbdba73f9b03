"""
Media model for uploaded files.
Files may be anonymous (no uploader), private to their uploader, or public.
"""

from sqlalchemy import String, Integer, Boolean, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from noticeboard.database import Base
import uuid
from typing import Optional


class Media(Base):
    """
    Uploaded media file metadata.
    The file itself lives under the configured upload directory.
    """

    __tablename__ = "media"

    filename: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Original filename as uploaded"
    )

    file_path: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        unique=True,
        comment="Storage path relative to the upload directory"
    )

    mime_type: Mapped[str] = mapped_column(
        String(100),
        nullable=False
    )

    file_size: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="File size in bytes"
    )

    width: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    height: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    alt: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="Alternative text"
    )

    uploaded_by_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="User who uploaded the file, if any"
    )

    is_public: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        index=True,
        comment="Whether anyone may read this file"
    )

    def __repr__(self) -> str:
        return f"<Media(id={self.id}, filename={self.filename}, is_public={self.is_public})>"
