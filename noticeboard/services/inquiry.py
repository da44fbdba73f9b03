"""
Inquiry service.
"""

from typing import Any, Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.access import authenticated, inquiries_delete, properties_read
from noticeboard.models.inquiry import Inquiry
from noticeboard.models.property import Property
from noticeboard.models.user import User
from noticeboard.repositories.base import BaseRepository
from noticeboard.repositories.inquiry import InquiryRepository
from noticeboard.services.base import CollectionService
from noticeboard.utils.exceptions import NotFoundError
import logging

logger = logging.getLogger(__name__)


class InquiryService(CollectionService[Inquiry]):
    """Inquiries about a listing; the inquirer is always the requesting user."""

    resource_name = "Inquiry"

    read_access = staticmethod(authenticated)
    create_access = staticmethod(authenticated)
    update_access = staticmethod(authenticated)
    delete_access = staticmethod(inquiries_delete)

    def __init__(self, db: AsyncSession):
        super().__init__(InquiryRepository(db))
        self.property_repo = BaseRepository(Property, db)

    async def before_create(self, data: Dict[str, Any], user: Optional[User]) -> Dict[str, Any]:
        # Listings the requester cannot see are reported as missing
        listing = await self.property_repo.get_by_id(data["property_id"], properties_read(user))
        if listing is None:
            raise NotFoundError("Property", str(data["property_id"]))

        data["inquirer_id"] = user.id
        return data

    async def before_update(self, obj: Inquiry, data: Dict[str, Any], user: Optional[User]) -> Dict[str, Any]:
        data.pop("inquirer_id", None)
        data.pop("property_id", None)
        return data
