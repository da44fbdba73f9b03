"""
One-shot claims used to make bootstrap decisions atomic.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from noticeboard.database import Base


FIRST_ADMIN_CLAIM = "first-admin"


class BootstrapClaim(Base):
    """A named claim; the unique name guarantees a single winner."""

    __tablename__ = "bootstrap_claims"

    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
