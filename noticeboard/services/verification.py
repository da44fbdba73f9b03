"""
Identity verification workflow.

Users submit identity documents; an administrator reviews the request and
the outcome is copied onto the user's verification status.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.access import admin, authenticated, ensure_allowed, media_read, verification_requests_read
from noticeboard.models.media import Media
from noticeboard.models.user import User, VerificationStatus
from noticeboard.models.verification_request import VerificationRequest, ReviewStatus
from noticeboard.repositories.base import BaseRepository
from noticeboard.repositories.user import UserRepository
from noticeboard.repositories.verification_request import VerificationRequestRepository
from noticeboard.services.base import CollectionService
from noticeboard.utils.exceptions import NotFoundError
import uuid
import logging

logger = logging.getLogger(__name__)

# Review outcome -> user verification status
OUTCOME_STATUS = {
    ReviewStatus.APPROVED: VerificationStatus.VERIFIED,
    ReviewStatus.REJECTED: VerificationStatus.REJECTED,
}

DOCUMENT_FIELDS = ("identification_document_id", "selfie_with_id_id")


class VerificationRequestService(CollectionService[VerificationRequest]):
    """Verification requests collection; one request per user."""

    resource_name = "Verification request"

    read_access = staticmethod(verification_requests_read)
    create_access = staticmethod(authenticated)
    update_access = staticmethod(admin)
    delete_access = staticmethod(admin)

    def __init__(self, db: AsyncSession):
        super().__init__(VerificationRequestRepository(db))
        self.user_repo = UserRepository(db)
        self.media_repo = BaseRepository(Media, db)

    async def _check_documents(self, data: Dict[str, Any], user: User) -> None:
        """Referenced documents must exist and be readable by the submitter."""
        for field in DOCUMENT_FIELDS:
            media_id = data.get(field)
            if media_id is None:
                continue
            if await self.media_repo.get_by_id(media_id, media_read(user)) is None:
                raise NotFoundError("Media", str(media_id))

    async def submit(self, data: Dict[str, Any], user: User) -> VerificationRequest:
        """
        Create the user's verification request, or resubmit the existing one.

        A resubmission resets the request to pending with a fresh submission
        time. Either way the user's verification status becomes pending.
        """
        ensure_allowed(self.create_access(user), user, "submit verification request")
        await self._check_documents(data, user)

        data = {
            **{key: value for key, value in data.items() if value is not None},
            "user_id": user.id,
            "user_name": user.name,
            "user_email": user.email,
            "status": ReviewStatus.PENDING,
            "submitted_at": datetime.now(timezone.utc),
        }

        existing = await self.repository.get_by_user(user.id)
        if existing is not None:
            request = await self.repository.update(existing, data)
            logger.info(f"Verification request {request.id} resubmitted by user {user.id}")
        else:
            request = await self.create(data, user)
            logger.info(f"Verification request {request.id} submitted by user {user.id}")

        await self.user_repo.update(user, {"verification_status": VerificationStatus.PENDING})
        return request

    async def list_requests(
        self,
        user: Optional[User],
        page: int = 1,
        limit: int = 10,
        status: Optional[ReviewStatus] = None
    ) -> Tuple[List[VerificationRequest], int]:
        """Newest first, optionally filtered by review status."""
        where = [VerificationRequest.status == status] if status is not None else []
        return await self.list(user, where=where, page=page, limit=limit, order_by="-created_at")

    async def review(self, id: uuid.UUID, data: Dict[str, Any], reviewer: User) -> VerificationRequest:
        """
        Apply an administrator's changes to a request.

        Moving the status away from pending stamps the review time and reviewer.
        """
        status = data.get("status")
        if status is not None and status != ReviewStatus.PENDING:
            data["reviewed_at"] = datetime.now(timezone.utc)
            data["reviewed_by_id"] = reviewer.id
        return await self.update(id, data, reviewer)

    async def after_change(
        self,
        obj: VerificationRequest,
        previous: Optional[Dict[str, Any]],
        operation: str
    ) -> None:
        if operation != "update" or previous is None or previous.get("status") == obj.status:
            return

        new_status = OUTCOME_STATUS.get(obj.status)
        if new_status is None:
            return

        try:
            user = await self.user_repo.get_by_id(obj.user_id)
            if user is None:
                logger.error(f"User {obj.user_id} of verification request {obj.id} not found")
                return
            await self.user_repo.update(user, {"verification_status": new_status})
            logger.info(f"User {user.id} verification status set to {new_status.value}")
        except Exception as e:
            logger.error(f"Error updating user verification status for request {obj.id}: {e}")
