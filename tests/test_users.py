"""
Tests for registration, authentication and user management endpoints.
"""

import pytest
from fastapi import status
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.models.user import User, UserRole
from noticeboard.repositories.user import UserRepository
from noticeboard.services.user import UserService
from noticeboard.utils.exceptions import InsufficientPermissionsError
from conftest import TEST_PASSWORD, auth_headers

API = "/api/v1"


def registration(email: str, **extra) -> dict:
    return {"email": email, "password": "secret123", "name": "New Member", **extra}


class TestFirstUserIsAdmin:

    @pytest.mark.asyncio
    async def test_first_registered_user_becomes_admin(self, async_client: AsyncClient):
        response = await async_client.post(f"{API}/auth/register", json=registration("first@example.com"))

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["user"]["role"] == "admin"
        assert data["tokens"]["token_type"] == "bearer"

    @pytest.mark.asyncio
    async def test_second_user_keeps_default_role(self, async_client: AsyncClient):
        await async_client.post(f"{API}/auth/register", json=registration("first@example.com"))
        response = await async_client.post(f"{API}/auth/register", json=registration("second@example.com"))

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["user"]["role"] == "user"

    @pytest.mark.asyncio
    async def test_first_user_is_admin_even_when_asking_for_user_role(self, async_client: AsyncClient):
        response = await async_client.post(
            f"{API}/auth/register", json=registration("first@example.com", role="user")
        )

        assert response.json()["user"]["role"] == "admin"

    @pytest.mark.asyncio
    async def test_emptied_table_promotes_next_user(self, db_session: AsyncSession):
        service = UserService(db_session)
        first = await service.register(registration("first@example.com"))
        first_role = first.role
        await service.delete(first.id, first)
        assert await service.repository.count_all() == 0

        second = await service.register(registration("second@example.com"))

        assert first_role == UserRole.ADMIN
        assert second.role == UserRole.ADMIN

    @pytest.mark.asyncio
    async def test_deleting_one_of_several_users_keeps_claim(self, db_session: AsyncSession):
        service = UserService(db_session)
        first = await service.register(registration("first@example.com"))
        second = await service.register(registration("second@example.com"))
        await service.delete(second.id, first)

        third = await service.register(registration("third@example.com"))

        assert third.role == UserRole.USER

    @pytest.mark.asyncio
    async def test_count_failure_keeps_default_role(self, db_session: AsyncSession, monkeypatch):
        async def failing_count(self):
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(UserRepository, "count_all", failing_count)

        user = await UserService(db_session).register(registration("first@example.com"))

        assert user.id is not None
        assert user.role == UserRole.USER

    @pytest.mark.asyncio
    async def test_public_registration_cannot_request_admin(self, async_client: AsyncClient, test_user: User):
        response = await async_client.post(
            f"{API}/auth/register", json=registration("sneaky@example.com", role="admin")
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["error"]["code"] == "FORBIDDEN"


class TestRegistrationValidation:

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, async_client: AsyncClient, test_user: User):
        response = await async_client.post(f"{API}/auth/register", json=registration("USER@example.com"))

        assert response.status_code == status.HTTP_409_CONFLICT

    @pytest.mark.asyncio
    async def test_weak_password_rejected(self, async_client: AsyncClient):
        response = await async_client.post(
            f"{API}/auth/register",
            json={"email": "weak@example.com", "password": "onlyletters", "name": "Weak"}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestAuthenticationEndpoints:

    @pytest.mark.asyncio
    async def test_login_and_me(self, async_client: AsyncClient, test_user: User):
        response = await async_client.post(
            f"{API}/auth/login", json={"email": test_user.email, "password": TEST_PASSWORD}
        )
        assert response.status_code == status.HTTP_200_OK
        tokens = response.json()["tokens"]

        me = await async_client.get(
            f"{API}/auth/me", headers={"Authorization": f"Bearer {tokens['access_token']}"}
        )
        assert me.status_code == status.HTTP_200_OK
        assert me.json()["email"] == test_user.email

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, async_client: AsyncClient, test_user: User):
        response = await async_client.post(
            f"{API}/auth/login", json={"email": test_user.email, "password": "wrongpass1"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_refresh_issues_access_token(self, async_client: AsyncClient, test_user: User):
        login = await async_client.post(
            f"{API}/auth/login", json={"email": test_user.email, "password": TEST_PASSWORD}
        )
        refresh_token = login.json()["tokens"]["refresh_token"]

        response = await async_client.post(f"{API}/auth/refresh", json={"refresh_token": refresh_token})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["access_token"]

    @pytest.mark.asyncio
    async def test_access_token_cannot_refresh(self, async_client: AsyncClient, test_user: User):
        access_token = auth_headers(test_user)["Authorization"].split(" ", 1)[1]

        response = await async_client.post(f"{API}/auth/refresh", json={"refresh_token": access_token})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_me_requires_token(self, async_client: AsyncClient):
        response = await async_client.get(f"{API}/auth/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestUserManagement:

    @pytest.mark.asyncio
    async def test_list_users_requires_authentication(self, async_client: AsyncClient, test_user: User):
        anonymous = await async_client.get(f"{API}/users")
        authenticated = await async_client.get(f"{API}/users", headers=auth_headers(test_user))

        assert anonymous.status_code == status.HTTP_401_UNAUTHORIZED
        assert authenticated.status_code == status.HTTP_200_OK
        assert authenticated.json()["total"] == 1

    @pytest.mark.asyncio
    async def test_user_updates_own_profile(self, async_client: AsyncClient, test_user: User):
        response = await async_client.patch(
            f"{API}/users/{test_user.id}",
            json={"name": "Renamed", "phone": "+237 600 000 000"},
            headers=auth_headers(test_user)
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Renamed"

    @pytest.mark.asyncio
    async def test_user_cannot_update_someone_else(
        self, async_client: AsyncClient, test_user: User, other_user: User
    ):
        response = await async_client.patch(
            f"{API}/users/{other_user.id}", json={"name": "Hijacked"}, headers=auth_headers(test_user)
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.asyncio
    async def test_user_cannot_promote_self(self, async_client: AsyncClient, test_user: User):
        response = await async_client.patch(
            f"{API}/users/{test_user.id}", json={"role": "admin"}, headers=auth_headers(test_user)
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.asyncio
    async def test_admin_sets_verification_status(
        self, async_client: AsyncClient, test_admin: User, test_user: User
    ):
        response = await async_client.patch(
            f"{API}/users/{test_user.id}",
            json={"verification_status": "verified"},
            headers=auth_headers(test_admin)
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["verification_status"] == "verified"

    @pytest.mark.asyncio
    async def test_only_admin_deletes_users(
        self, async_client: AsyncClient, test_admin: User, test_user: User, other_user: User
    ):
        denied = await async_client.delete(f"{API}/users/{other_user.id}", headers=auth_headers(test_user))
        deleted = await async_client.delete(f"{API}/users/{other_user.id}", headers=auth_headers(test_admin))

        assert denied.status_code == status.HTTP_403_FORBIDDEN
        assert deleted.status_code == status.HTTP_204_NO_CONTENT

    @pytest.mark.asyncio
    async def test_missing_user_is_404(self, async_client: AsyncClient, test_admin: User):
        response = await async_client.get(
            f"{API}/users/00000000-0000-0000-0000-000000000000", headers=auth_headers(test_admin)
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUserServiceRules:

    @pytest.mark.asyncio
    async def test_non_admin_cannot_set_is_active(self, db_session: AsyncSession, test_user: User):
        service = UserService(db_session)

        with pytest.raises(InsufficientPermissionsError):
            await service.update(test_user.id, {"is_active": False}, test_user)
