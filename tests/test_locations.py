"""
Tests for the neighborhoods and amenities collections.
"""

import uuid

import pytest
from fastapi import status
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.models.user import User
from conftest import MediaFactory, auth_headers

API = "/api/v1"


def neighborhood_payload(**overrides) -> dict:
    data = {"name": "Centre Ville", "city": "Yaoundé", "region": "centre", "latitude": "3.848", "longitude": "11.5021"}
    data.update(overrides)
    return data


class TestNeighborhoods:

    @pytest.mark.asyncio
    async def test_slug_combines_name_and_city(self, async_client: AsyncClient, test_user: User):
        headers = auth_headers(test_user)
        yaounde = await async_client.post(f"{API}/neighborhoods", json=neighborhood_payload(), headers=headers)
        bamenda = await async_client.post(
            f"{API}/neighborhoods",
            json=neighborhood_payload(city="Bamenda", region="northwest"),
            headers=headers
        )

        assert yaounde.status_code == status.HTTP_201_CREATED
        assert yaounde.json()["slug"] == "centre-ville-yaounde"
        assert bamenda.json()["slug"] == "centre-ville-bamenda"
        assert bamenda.json()["region"] == "northwest"

    @pytest.mark.asyncio
    async def test_name_is_unique_within_a_city(self, async_client: AsyncClient, test_user: User):
        headers = auth_headers(test_user)
        await async_client.post(f"{API}/neighborhoods", json=neighborhood_payload(), headers=headers)

        response = await async_client.post(f"{API}/neighborhoods", json=neighborhood_payload(), headers=headers)

        assert response.status_code == status.HTTP_409_CONFLICT

    @pytest.mark.asyncio
    async def test_unknown_region_rejected(self, async_client: AsyncClient, test_user: User):
        response = await async_client.post(
            f"{API}/neighborhoods", json=neighborhood_payload(region="atlantis"), headers=auth_headers(test_user)
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_public_read_authenticated_write(self, async_client: AsyncClient, test_user: User):
        anonymous = await async_client.post(f"{API}/neighborhoods", json=neighborhood_payload())
        await async_client.post(f"{API}/neighborhoods", json=neighborhood_payload(), headers=auth_headers(test_user))

        listing = await async_client.get(f"{API}/neighborhoods")
        by_slug = await async_client.get(f"{API}/neighborhoods/slug/centre-ville-yaounde")

        assert anonymous.status_code == status.HTTP_401_UNAUTHORIZED
        assert listing.json()["total"] == 1
        assert by_slug.json()["city"] == "Yaoundé"


class TestAmenities:

    @staticmethod
    def amenity_payload(icon_id, **overrides) -> dict:
        data = {
            "name": "Borehole",
            "category": "utilities",
            "property_types": ["residential", "commercial", "residential"],
            "icon_id": str(icon_id),
        }
        data.update(overrides)
        return data

    @pytest.mark.asyncio
    async def test_admin_creates_amenity(
        self, async_client: AsyncClient, db_session: AsyncSession, test_admin: User
    ):
        icon = await MediaFactory.create_media(db_session, uploaded_by=test_admin, is_public=True)

        response = await async_client.post(
            f"{API}/amenities", json=self.amenity_payload(icon.id), headers=auth_headers(test_admin)
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["slug"] == "borehole"
        assert data["property_types"] == ["residential", "commercial"]
        assert data["icon_id"] == str(icon.id)

    @pytest.mark.asyncio
    async def test_only_admin_writes(
        self, async_client: AsyncClient, db_session: AsyncSession, test_user: User
    ):
        icon = await MediaFactory.create_media(db_session, uploaded_by=test_user)

        denied = await async_client.post(
            f"{API}/amenities", json=self.amenity_payload(icon.id), headers=auth_headers(test_user)
        )
        anonymous = await async_client.post(f"{API}/amenities", json=self.amenity_payload(icon.id))
        public = await async_client.get(f"{API}/amenities")

        assert denied.status_code == status.HTTP_403_FORBIDDEN
        assert anonymous.status_code == status.HTTP_401_UNAUTHORIZED
        assert public.status_code == status.HTTP_200_OK

    @pytest.mark.asyncio
    async def test_icon_must_exist(self, async_client: AsyncClient, test_admin: User):
        response = await async_client.post(
            f"{API}/amenities", json=self.amenity_payload(uuid.uuid4()), headers=auth_headers(test_admin)
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_property_types_required(
        self, async_client: AsyncClient, db_session: AsyncSession, test_admin: User
    ):
        icon = await MediaFactory.create_media(db_session, uploaded_by=test_admin)

        response = await async_client.post(
            f"{API}/amenities",
            json=self.amenity_payload(icon.id, property_types=[]),
            headers=auth_headers(test_admin)
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
