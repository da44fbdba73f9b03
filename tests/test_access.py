"""
Tests for collection access predicates and how they filter queries.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from noticeboard.access import (
    admin,
    anyone,
    as_clause,
    authenticated,
    ensure_allowed,
    media_read,
    media_update,
    properties_read,
    verification_requests_read,
    verified_or_admin
)
from noticeboard.models.media import Media
from noticeboard.models.property import Property, PropertyStatus
from noticeboard.models.user import User
from noticeboard.repositories.base import BaseRepository
from noticeboard.utils.exceptions import InsufficientPermissionsError, UnauthorizedError
from conftest import MediaFactory, PropertyFactory


class TestRolePredicates:

    def test_anyone_and_authenticated(self, test_user: User):
        assert anyone(None) is True
        assert authenticated(None) is False
        assert authenticated(test_user) is True

    def test_admin(self, test_user: User, test_admin: User):
        assert admin(None) is False
        assert admin(test_user) is False
        assert admin(test_admin) is True

    def test_verified_or_admin(self, test_user: User, verified_user: User, test_admin: User):
        assert verified_or_admin(None) is False
        assert verified_or_admin(test_user) is False
        assert verified_or_admin(verified_user) is True
        assert verified_or_admin(test_admin) is True

    def test_verification_requests_read(self, test_user: User, test_admin: User):
        assert verification_requests_read(None) is False
        assert verification_requests_read(test_admin) is True
        assert isinstance(verification_requests_read(test_user), ColumnElement)


class TestApplyingAccess:

    def test_ensure_allowed_rejects_anonymous_with_401(self):
        with pytest.raises(UnauthorizedError):
            ensure_allowed(False, None, "create property")

    def test_ensure_allowed_rejects_user_with_403(self, test_user: User):
        with pytest.raises(InsufficientPermissionsError):
            ensure_allowed(False, test_user, "delete user")

    def test_ensure_allowed_passes_filters_through(self, test_user: User):
        clause = media_update(test_user)
        assert ensure_allowed(clause, test_user, "update media") is clause
        assert ensure_allowed(True, test_user, "update media") is True

    def test_as_clause_keeps_filters(self, test_user: User):
        clause = media_update(test_user)
        assert as_clause(clause) is clause
        assert as_clause(True) is not None


class TestMediaReadAccess:

    @pytest.mark.asyncio
    async def test_anonymous_reads_media_without_uploader(self, db_session: AsyncSession):
        orphan = await MediaFactory.create_media(db_session, uploaded_by=None)
        repo = BaseRepository(Media, db_session)

        assert await repo.get_by_id(orphan.id, media_read(None)) is not None

    @pytest.mark.asyncio
    async def test_private_media_hidden_from_other_users(
        self, db_session: AsyncSession, test_user: User, other_user: User
    ):
        private = await MediaFactory.create_media(db_session, uploaded_by=test_user, is_public=False)
        repo = BaseRepository(Media, db_session)

        assert await repo.get_by_id(private.id, media_read(other_user)) is None
        assert await repo.get_by_id(private.id, media_read(None)) is None
        assert await repo.get_by_id(private.id, media_read(test_user)) is not None

    @pytest.mark.asyncio
    async def test_public_media_visible_to_everyone(
        self, db_session: AsyncSession, test_user: User, other_user: User
    ):
        public = await MediaFactory.create_media(db_session, uploaded_by=test_user, is_public=True)
        repo = BaseRepository(Media, db_session)

        assert await repo.get_by_id(public.id, media_read(None)) is not None
        assert await repo.get_by_id(public.id, media_read(other_user)) is not None

    @pytest.mark.asyncio
    async def test_admin_reads_everything(self, db_session: AsyncSession, test_user: User, test_admin: User):
        private = await MediaFactory.create_media(db_session, uploaded_by=test_user)

        assert media_read(test_admin) is True
        repo = BaseRepository(Media, db_session)
        assert await repo.get_by_id(private.id, media_read(test_admin)) is not None


class TestPropertyReadAccess:

    @pytest.mark.asyncio
    async def test_public_sees_only_approved(
        self, db_session: AsyncSession, verified_user: User, other_user: User
    ):
        approved = await PropertyFactory.create_property(db_session, verified_user, status=PropertyStatus.APPROVED)
        pending = await PropertyFactory.create_property(db_session, verified_user)
        repo = BaseRepository(Property, db_session)

        anonymous_ids = {p.id for p in await repo.find(access=properties_read(None))}
        other_ids = {p.id for p in await repo.find(access=properties_read(other_user))}
        owner_ids = {p.id for p in await repo.find(access=properties_read(verified_user))}

        assert anonymous_ids == {approved.id}
        assert other_ids == {approved.id}
        assert owner_ids == {approved.id, pending.id}
