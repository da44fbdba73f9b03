"""
User repository for authentication and user management operations.
Also holds the bootstrap claim used to promote the very first user.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, delete
from sqlalchemy.exc import IntegrityError
from noticeboard.repositories.base import BaseRepository
from noticeboard.models.user import User
from noticeboard.models.bootstrap import BootstrapClaim
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """
    Repository for user accounts.
    Emails are stored normalized (lowercase) so lookups are case-insensitive.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: Email address to search for

        Returns:
            User instance if found, None otherwise
        """
        try:
            normalized_email = email.lower().strip()
            result = await self.db.execute(select(User).where(User.email == normalized_email))
            user = result.scalar_one_or_none()

            if user:
                logger.debug(f"Retrieved user by email: {email}")
            else:
                logger.debug(f"User with email {email} not found")

            return user
        except Exception as e:
            logger.error(f"Failed to get user by email {email}: {e}")
            raise

    async def authenticate(self, email: str, password: str) -> Optional[User]:
        """
        Authenticate user with email and password.

        Returns:
            User instance if authentication successful, None otherwise
        """
        user = await self.get_by_email(email)

        if not user:
            logger.debug(f"Authentication failed: user {email} not found")
            return None

        if not user.is_active:
            logger.debug(f"Authentication failed: user {email} is inactive")
            return None

        if not user.verify_password(password):
            logger.debug(f"Authentication failed: invalid password for {email}")
            return None

        logger.info(f"User authenticated successfully: {email}")
        return user

    async def count_all(self) -> int:
        result = await self.db.execute(select(func.count(User.id)))
        return result.scalar()

    async def claim(self, name: str) -> bool:
        """
        Insert a named bootstrap claim inside a savepoint.

        The claim is part of the session's open transaction and is committed
        together with whatever the caller persists next.

        Returns:
            True if this session now holds the claim, False if it was already taken
        """
        try:
            async with self.db.begin_nested():
                self.db.add(BootstrapClaim(name=name))
            logger.debug(f"Acquired bootstrap claim '{name}'")
            return True
        except IntegrityError:
            logger.info(f"Bootstrap claim '{name}' already taken")
            return False

    async def release(self, name: str) -> bool:
        """
        Drop a named bootstrap claim so it can be won again.

        Returns:
            True if a claim was removed
        """
        try:
            result = await self.db.execute(delete(BootstrapClaim).where(BootstrapClaim.name == name))
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to release bootstrap claim '{name}': {e}")
            raise

        if result.rowcount:
            logger.info(f"Released bootstrap claim '{name}'")
        return bool(result.rowcount)
