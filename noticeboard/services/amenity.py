"""
Amenities collection, maintained by administrators.
"""

from typing import Any, Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.access import admin, anyone
from noticeboard.models.amenity import Amenity
from noticeboard.models.user import User
from noticeboard.repositories.amenity import AmenityRepository
from noticeboard.repositories.media import MediaRepository
from noticeboard.services.content import SlugCollectionService
from noticeboard.utils.exceptions import ValidationError


class AmenityService(SlugCollectionService[Amenity]):
    resource_name = "Amenity"
    slug_source = "name"

    read_access = staticmethod(anyone)
    create_access = staticmethod(admin)
    update_access = staticmethod(admin)
    delete_access = staticmethod(admin)

    def __init__(self, db: AsyncSession):
        super().__init__(AmenityRepository(db))
        self.media_repo = MediaRepository(db)

    async def _prepare(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if data.get("icon_id") is not None and not await self.media_repo.exists(data["icon_id"]):
            raise ValidationError(
                "Icon not found",
                field_errors=[{"field": "icon_id", "message": f"No media with id {data['icon_id']}"}]
            )
        if data.get("property_types") is not None:
            # Stored as plain values, duplicates dropped
            data["property_types"] = list(dict.fromkeys(str(pt.value) for pt in data["property_types"]))
        return data

    async def before_create(self, data: Dict[str, Any], user: Optional[User]) -> Dict[str, Any]:
        data = await self._prepare(data)
        return await super().before_create(data, user)

    async def before_update(self, obj: Amenity, data: Dict[str, Any], user: Optional[User]) -> Dict[str, Any]:
        if "icon_id" in data and data["icon_id"] is None:
            data.pop("icon_id")
        data = await self._prepare(data)
        return await super().before_update(obj, data, user)
