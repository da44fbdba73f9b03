"""
Tests for the dashboard statistics endpoint.
"""

import pytest
from fastapi import status
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.models.inquiry import ContactPreference, Inquiry, InquiryStatus, InquiryType
from noticeboard.models.property import PropertyStatus
from noticeboard.models.user import User
from noticeboard.repositories.base import BaseRepository
from noticeboard.services.dashboard import DashboardService
from conftest import PropertyFactory, auth_headers

STATS = "/api/dashboard/stats"


async def create_inquiry(db: AsyncSession, listing, inquirer: User, inquiry_status: InquiryStatus = InquiryStatus.NEW):
    return await BaseRepository(Inquiry, db).create({
        "property_id": listing.id,
        "inquirer_id": inquirer.id,
        "subject": "Still available?",
        "message": "Can I visit on Saturday?",
        "inquiry_type": InquiryType.VIEWING,
        "contact_preference": ContactPreference.EMAIL,
        "status": inquiry_status,
    })


class TestDashboardStats:

    @pytest.fixture
    async def activity(self, db_session: AsyncSession, verified_user: User, other_user: User, test_user: User):
        """Two listings for the verified owner, one for another user, with inquiries on each."""
        first = await PropertyFactory.create_property(db_session, verified_user, status=PropertyStatus.APPROVED)
        second = await PropertyFactory.create_property(db_session, verified_user)
        elsewhere = await PropertyFactory.create_property(db_session, other_user, status=PropertyStatus.APPROVED)

        await create_inquiry(db_session, first, test_user)
        await create_inquiry(db_session, first, test_user, inquiry_status=InquiryStatus.RESPONDED)
        await create_inquiry(db_session, second, test_user)
        await create_inquiry(db_session, elsewhere, test_user)

    @pytest.mark.asyncio
    async def test_requires_authentication(self, async_client: AsyncClient):
        response = await async_client.get(STATS)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_admin_sees_site_totals(self, async_client: AsyncClient, activity, test_admin: User):
        response = await async_client.get(STATS, headers=auth_headers(test_admin))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"total_properties": 3, "total_inquiries": 4, "pending_inquiries": 3}

    @pytest.mark.asyncio
    async def test_owner_sees_own_listings_and_their_inquiries(
        self, async_client: AsyncClient, activity, verified_user: User
    ):
        response = await async_client.get(STATS, headers=auth_headers(verified_user))

        assert response.json() == {"total_properties": 2, "total_inquiries": 3, "pending_inquiries": 2}

    @pytest.mark.asyncio
    async def test_inquirer_without_listings_sees_zero(
        self, async_client: AsyncClient, activity, test_user: User
    ):
        response = await async_client.get(STATS, headers=auth_headers(test_user))

        assert response.json() == {"total_properties": 0, "total_inquiries": 0, "pending_inquiries": 0}

    @pytest.mark.asyncio
    async def test_failure_returns_error_body(self, async_client: AsyncClient, test_user: User, monkeypatch):
        async def failing_stats(self, user):
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(DashboardService, "stats", failing_stats)

        response = await async_client.get(STATS, headers=auth_headers(test_user))

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Failed to fetch dashboard stats"}
