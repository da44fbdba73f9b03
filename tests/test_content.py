"""
Tests for slug-addressed content collections and property inquiries.
"""

import uuid

import pytest
from fastapi import status
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.models.property import PropertyStatus
from noticeboard.models.user import User
from conftest import PropertyFactory, auth_headers

API = "/api/v1"


class TestContentCollections:

    @pytest.mark.asyncio
    async def test_anonymous_cannot_create(self, async_client: AsyncClient):
        response = await async_client.post(f"{API}/categories", json={"title": "Rentals"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_slug_generated_from_title(self, async_client: AsyncClient, test_user: User):
        headers = auth_headers(test_user)
        first = await async_client.post(f"{API}/categories", json={"title": "Office Space"}, headers=headers)
        second = await async_client.post(f"{API}/categories", json={"title": "Office Space"}, headers=headers)

        assert first.status_code == status.HTTP_201_CREATED
        assert first.json()["slug"] == "office-space"
        assert second.json()["slug"] == "office-space-2"

    @pytest.mark.asyncio
    async def test_faq_slug_comes_from_question(self, async_client: AsyncClient, test_user: User):
        response = await async_client.post(
            f"{API}/faqs",
            json={"question": "How do I get verified?", "answer": "Submit your ID and a selfie."},
            headers=auth_headers(test_user)
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["slug"] == "how-do-i-get-verified"
        assert response.json()["published"] is True

    @pytest.mark.asyncio
    async def test_explicit_duplicate_slug_conflicts(self, async_client: AsyncClient, test_user: User):
        headers = auth_headers(test_user)
        await async_client.post(f"{API}/property-types", json={"name": "Land", "slug": "land"}, headers=headers)

        response = await async_client.post(
            f"{API}/property-types", json={"name": "Plots", "slug": "Land"}, headers=headers
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error"]["code"] == "CONFLICT"

    @pytest.mark.asyncio
    async def test_read_by_slug(self, async_client: AsyncClient, test_user: User):
        created = await async_client.post(
            f"{API}/knowledge-base",
            json={"title": "Buying land safely", "content": "Always check the land title."},
            headers=auth_headers(test_user)
        )

        found = await async_client.get(f"{API}/knowledge-base/slug/buying-land-safely")
        missing = await async_client.get(f"{API}/knowledge-base/slug/nothing-here")

        assert found.status_code == status.HTTP_200_OK
        assert found.json()["id"] == created.json()["id"]
        assert missing.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_update_and_delete(self, async_client: AsyncClient, test_user: User):
        headers = auth_headers(test_user)
        created = (await async_client.post(f"{API}/categories", json={"title": "Rentals"}, headers=headers)).json()

        updated = await async_client.patch(
            f"{API}/categories/{created['id']}", json={"title": "Long-term rentals"}, headers=headers
        )
        deleted = await async_client.delete(f"{API}/categories/{created['id']}", headers=headers)
        listing = await async_client.get(f"{API}/categories")

        assert updated.json()["title"] == "Long-term rentals"
        assert updated.json()["slug"] == "rentals"
        assert deleted.status_code == status.HTTP_204_NO_CONTENT
        assert listing.json()["total"] == 0


class TestInquiries:

    @staticmethod
    def inquiry_payload(property_id, **overrides) -> dict:
        data = {
            "property_id": str(property_id),
            "subject": "Is the plot still available?",
            "message": "I would like to visit next week.",
        }
        data.update(overrides)
        return data

    @pytest.mark.asyncio
    async def test_inquirer_is_the_requesting_user(
        self, async_client: AsyncClient, db_session: AsyncSession, verified_user: User, test_user: User
    ):
        listing = await PropertyFactory.create_property(db_session, verified_user, status=PropertyStatus.APPROVED)

        response = await async_client.post(
            f"{API}/inquiries",
            json=self.inquiry_payload(listing.id, inquirer_id=str(verified_user.id)),
            headers=auth_headers(test_user)
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["inquirer_id"] == str(test_user.id)
        assert response.json()["status"] == "new"

    @pytest.mark.asyncio
    async def test_missing_property(self, async_client: AsyncClient, test_user: User):
        response = await async_client.post(
            f"{API}/inquiries", json=self.inquiry_payload(uuid.uuid4()), headers=auth_headers(test_user)
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_hidden_listing_is_reported_missing(
        self, async_client: AsyncClient, db_session: AsyncSession, verified_user: User, test_user: User
    ):
        pending = await PropertyFactory.create_property(db_session, verified_user)

        stranger = await async_client.post(
            f"{API}/inquiries", json=self.inquiry_payload(pending.id), headers=auth_headers(test_user)
        )
        owner = await async_client.post(
            f"{API}/inquiries", json=self.inquiry_payload(pending.id), headers=auth_headers(verified_user)
        )

        assert stranger.status_code == status.HTTP_404_NOT_FOUND
        assert owner.status_code == status.HTTP_201_CREATED

    @pytest.mark.asyncio
    async def test_offer_requires_amount(
        self, async_client: AsyncClient, db_session: AsyncSession, verified_user: User, test_user: User
    ):
        listing = await PropertyFactory.create_property(db_session, verified_user, status=PropertyStatus.APPROVED)

        response = await async_client.post(
            f"{API}/inquiries",
            json=self.inquiry_payload(listing.id, inquiry_type="offer"),
            headers=auth_headers(test_user)
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_anonymous_cannot_inquire(
        self, async_client: AsyncClient, db_session: AsyncSession, verified_user: User
    ):
        listing = await PropertyFactory.create_property(db_session, verified_user, status=PropertyStatus.APPROVED)

        response = await async_client.post(f"{API}/inquiries", json=self.inquiry_payload(listing.id))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_filter_by_property(
        self, async_client: AsyncClient, db_session: AsyncSession, verified_user: User, test_user: User
    ):
        first = await PropertyFactory.create_property(db_session, verified_user, status=PropertyStatus.APPROVED)
        second = await PropertyFactory.create_property(db_session, verified_user, status=PropertyStatus.APPROVED)
        headers = auth_headers(test_user)
        await async_client.post(f"{API}/inquiries", json=self.inquiry_payload(first.id), headers=headers)
        await async_client.post(f"{API}/inquiries", json=self.inquiry_payload(second.id), headers=headers)

        response = await async_client.get(f"{API}/inquiries", params={"property_id": str(second.id)}, headers=headers)

        assert [i["property_id"] for i in response.json()["items"]] == [str(second.id)]

    @pytest.mark.asyncio
    async def test_only_inquirer_or_admin_deletes(
        self,
        async_client: AsyncClient,
        db_session: AsyncSession,
        verified_user: User,
        test_user: User,
        other_user: User,
        test_admin: User
    ):
        listing = await PropertyFactory.create_property(db_session, verified_user, status=PropertyStatus.APPROVED)
        headers = auth_headers(test_user)
        own = (await async_client.post(f"{API}/inquiries", json=self.inquiry_payload(listing.id), headers=headers)).json()
        another = (await async_client.post(f"{API}/inquiries", json=self.inquiry_payload(listing.id), headers=headers)).json()

        denied = await async_client.delete(f"{API}/inquiries/{own['id']}", headers=auth_headers(other_user))
        by_inquirer = await async_client.delete(f"{API}/inquiries/{own['id']}", headers=headers)
        by_admin = await async_client.delete(f"{API}/inquiries/{another['id']}", headers=auth_headers(test_admin))

        assert denied.status_code == status.HTTP_403_FORBIDDEN
        assert by_inquirer.status_code == status.HTTP_204_NO_CONTENT
        assert by_admin.status_code == status.HTTP_204_NO_CONTENT
