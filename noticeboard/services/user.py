"""
User service: registration, profile updates and the first-admin bootstrap.
"""

from typing import Any, Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from noticeboard.access import admin, anyone, authenticated, users_update
from noticeboard.models.user import User, UserRole
from noticeboard.models.bootstrap import FIRST_ADMIN_CLAIM
from noticeboard.repositories.user import UserRepository
from noticeboard.services.base import CollectionService
from noticeboard.utils.exceptions import (
    DuplicateResourceError,
    InsufficientPermissionsError,
    ValidationError
)
import logging

logger = logging.getLogger(__name__)

# Fields only an administrator may set (any user may ask for the default role)
ADMIN_ONLY_FIELDS = ("role", "verification_status", "is_active")


class UserService(CollectionService[User]):
    """
    Users collection.

    Anyone may register; the very first account becomes an administrator.
    Users edit their own profile, administrators edit anyone.
    """

    resource_name = "User"

    read_access = staticmethod(authenticated)
    create_access = staticmethod(anyone)
    update_access = staticmethod(users_update)
    delete_access = staticmethod(admin)

    def __init__(self, db: AsyncSession):
        super().__init__(UserRepository(db))

    async def _normalize_email(self, email: str, current: Optional[User] = None) -> str:
        try:
            email = User.validate_email_format(email)
        except ValueError as e:
            raise ValidationError(str(e))

        existing = await self.repository.get_by_email(email)
        if existing is not None and (current is None or existing.id != current.id):
            raise DuplicateResourceError("User", email)
        return email

    @staticmethod
    def _hash(password: str) -> str:
        try:
            return User.hash_password(password)
        except ValueError as e:
            raise ValidationError(str(e))

    @staticmethod
    def _check_admin_fields(data: Dict[str, Any], user: Optional[User], action: str) -> None:
        if user is not None and user.is_admin:
            return
        for field in ADMIN_ONLY_FIELDS:
            value = data.get(field)
            if field == "role" and value == UserRole.USER:
                continue
            if value is not None:
                logger.warning(f"Non-admin attempted to set '{field}' on {action}")
                raise InsufficientPermissionsError(f"set {field.replace('_', ' ')}")

    async def ensure_first_user_is_admin(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Promote the account being created to admin when no user exists yet.

        The promotion only happens for the session that wins the bootstrap
        claim, so two concurrent first signups yield one admin. The claim is
        released when the last user is deleted. A failure while counting
        leaves the requested role untouched.
        """
        try:
            count = await self.repository.count_all()
        except Exception as e:
            logger.error(f"Error checking user count for first-admin promotion: {e}")
            await self.db.rollback()
            return data

        if count == 0 and await self.repository.claim(FIRST_ADMIN_CLAIM):
            logger.info("First user created, assigning admin role")
            data["role"] = UserRole.ADMIN
        return data

    async def before_create(self, data: Dict[str, Any], user: Optional[User]) -> Dict[str, Any]:
        self._check_admin_fields(data, user, "registration")

        data["email"] = await self._normalize_email(data["email"])
        data["hashed_password"] = self._hash(data.pop("password"))
        data = {key: value for key, value in data.items() if value is not None}

        return await self.ensure_first_user_is_admin(data)

    async def after_delete(self, obj: User) -> None:
        # An emptied table hands the first-admin promotion out again
        try:
            if await self.repository.count_all() == 0:
                await self.repository.release(FIRST_ADMIN_CLAIM)
        except Exception as e:
            logger.error(f"Error releasing first-admin claim after deleting user {obj.id}: {e}")

    async def before_update(self, obj: User, data: Dict[str, Any], user: Optional[User]) -> Dict[str, Any]:
        self._check_admin_fields(data, user, "profile update")

        if data.get("email") is not None:
            data["email"] = await self._normalize_email(data["email"], current=obj)

        password = data.pop("password", None)
        if password is not None:
            data["hashed_password"] = self._hash(password)

        return data

    async def register(self, data: Dict[str, Any]) -> User:
        """Public signup; the requester is anonymous."""
        return await self.create(data, None)
