"""
Test configuration and fixtures for the notice board API.
Provides an in-memory database per test, an API client bound to it, and
user/content factories.
"""

import os
import tempfile

# Settings are read at import time, so configure them before importing the app
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "testing"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="noticeboard-uploads-")
os.environ.pop("NEXT_PUBLIC_SERVER_URL", None)
os.environ.pop("VERCEL_PROJECT_PRODUCTION_URL", None)

import io
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import AsyncGenerator, Dict, Optional

import pytest
from httpx import ASGITransport, AsyncClient
from PIL import Image as PILImage
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import noticeboard.models  # noqa: F401
from noticeboard.database import Base, get_db
from noticeboard.main import app
from noticeboard.models.amenity import Amenity, AmenityCategory
from noticeboard.models.media import Media
from noticeboard.models.neighborhood import CameroonRegion, Neighborhood
from noticeboard.models.property import Property, PropertyCategory, ListingType, PropertyStatus
from noticeboard.models.user import User, UserRole, VerificationStatus
from noticeboard.repositories.base import BaseRepository
from noticeboard.repositories.user import UserRepository
from noticeboard.utils.auth import create_access_token
from noticeboard.utils.cache import sitemap_cache


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_PASSWORD = "testpassword123"


@pytest.fixture
async def test_engine():
    """Fresh in-memory database with every table created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
async def async_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """API client whose requests share the test session."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def clear_sitemap_cache():
    sitemap_cache.clear()
    yield
    sitemap_cache.clear()


def auth_headers(user: User) -> Dict[str, str]:
    token = create_access_token(user_id=user.id, email=user.email, role=user.role)
    return {"Authorization": f"Bearer {token}"}


def as_utc(value: datetime) -> datetime:
    """SQLite returns naive datetimes; they are UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def make_image(format: str = "PNG", size=(40, 30)) -> bytes:
    buffer = io.BytesIO()
    PILImage.new("RGB", size, color=(200, 30, 30)).save(buffer, format=format)
    return buffer.getvalue()


# Test data factories
class UserFactory:
    """Factory for creating test users directly in the database."""

    @staticmethod
    async def create_user(
        db: AsyncSession,
        email: Optional[str] = None,
        password: str = TEST_PASSWORD,
        name: str = "Test User",
        role: UserRole = UserRole.USER,
        verification_status: VerificationStatus = VerificationStatus.UNVERIFIED,
        is_active: bool = True
    ) -> User:
        return await UserRepository(db).create({
            "email": email or f"user{uuid.uuid4().hex[:8]}@example.com",
            "hashed_password": User.hash_password(password),
            "name": name,
            "role": role,
            "verification_status": verification_status,
            "is_active": is_active,
        })


class PropertyFactory:
    """Factory for creating test listings directly in the database."""

    @staticmethod
    def create_property_data(**overrides) -> dict:
        data = {
            "title": "Family house in Bastos",
            "description": "Four bedrooms, garden and a garage.",
            "property_type": PropertyCategory.RESIDENTIAL,
            "listing_type": ListingType.SALE,
            "price": Decimal("85000000.00"),
            "area": Decimal("320.00"),
            "address": "Rue 1.234, Bastos, Yaounde",
        }
        data.update(overrides)
        return data

    @staticmethod
    async def create_property(
        db: AsyncSession,
        owner: User,
        status: PropertyStatus = PropertyStatus.PENDING,
        slug: Optional[str] = None,
        **overrides
    ) -> Property:
        data = PropertyFactory.create_property_data(**overrides)
        data.update({
            "owner_id": owner.id,
            "status": status,
            "slug": slug or f"listing-{uuid.uuid4().hex[:8]}",
        })
        return await BaseRepository(Property, db).create(data)


class MediaFactory:

    @staticmethod
    async def create_media(
        db: AsyncSession,
        uploaded_by: Optional[User] = None,
        is_public: bool = False
    ) -> Media:
        return await BaseRepository(Media, db).create({
            "filename": "document.png",
            "file_path": f"media/{uuid.uuid4().hex}.png",
            "mime_type": "image/png",
            "file_size": 1024,
            "width": 40,
            "height": 30,
            "uploaded_by_id": uploaded_by.id if uploaded_by else None,
            "is_public": is_public,
        })


class LocationFactory:
    """Neighborhoods and amenities for listing relation tests."""

    @staticmethod
    async def create_neighborhood(db: AsyncSession, name: str = "Bastos", city: str = "Yaounde") -> Neighborhood:
        return await BaseRepository(Neighborhood, db).create({
            "name": name,
            "city": city,
            "region": CameroonRegion.CENTRE,
            "slug": f"{name}-{city}-{uuid.uuid4().hex[:6]}".lower(),
        })

    @staticmethod
    async def create_amenity(
        db: AsyncSession,
        icon: Media,
        name: str = "Borehole",
        property_types=("residential",)
    ) -> Amenity:
        return await BaseRepository(Amenity, db).create({
            "name": name,
            "category": AmenityCategory.UTILITIES,
            "property_types": list(property_types),
            "icon_id": icon.id,
            "slug": f"{name}-{uuid.uuid4().hex[:6]}".lower(),
        })


# Common test fixtures
@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    return await UserFactory.create_user(db_session, email="user@example.com", name="Plain User")


@pytest.fixture
async def other_user(db_session: AsyncSession) -> User:
    return await UserFactory.create_user(db_session, email="other@example.com", name="Other User")


@pytest.fixture
async def verified_user(db_session: AsyncSession) -> User:
    return await UserFactory.create_user(
        db_session,
        email="verified@example.com",
        name="Verified Owner",
        verification_status=VerificationStatus.VERIFIED
    )


@pytest.fixture
async def test_admin(db_session: AsyncSession) -> User:
    return await UserFactory.create_user(
        db_session,
        email="admin@example.com",
        name="Site Admin",
        role=UserRole.ADMIN
    )
