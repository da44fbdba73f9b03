"""
Property service for listing management and admin review.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple
from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.access import media_read, properties_read, properties_update, properties_delete, verified_or_admin
from noticeboard.models.property import Property, PropertyStatus
from noticeboard.models.user import User
from noticeboard.repositories.amenity import AmenityRepository
from noticeboard.repositories.media import MediaRepository
from noticeboard.repositories.neighborhood import NeighborhoodRepository
from noticeboard.repositories.property import PropertyRepository, PropertySearchFilters
from noticeboard.services.content import SlugCollectionService
from noticeboard.utils.exceptions import InsufficientPermissionsError, ValidationError
import uuid
import logging

logger = logging.getLogger(__name__)

# Review fields only an administrator may set
REVIEW_FIELDS = ("status", "featured", "admin_notes")


class PropertyService(SlugCollectionService[Property]):
    """
    Properties collection.

    Verified users and administrators create listings, which start pending.
    The public sees approved listings; owners see and manage their own.
    """

    resource_name = "Property"
    sitemap_section = "properties"

    read_access = staticmethod(properties_read)
    create_access = staticmethod(verified_or_admin)
    update_access = staticmethod(properties_update)
    delete_access = staticmethod(properties_delete)

    def __init__(self, db: AsyncSession):
        super().__init__(PropertyRepository(db))
        self.media_repo = MediaRepository(db)
        self.amenity_repo = AmenityRepository(db)
        self.neighborhood_repo = NeighborhoodRepository(db)

    @staticmethod
    def _check_review_fields(data: Dict[str, Any], user: Optional[User]) -> None:
        if user is not None and user.is_admin:
            return
        for field in REVIEW_FIELDS:
            if data.get(field) is not None:
                logger.warning(f"Non-admin attempted to set property '{field}'")
                raise InsufficientPermissionsError(f"set property {field.replace('_', ' ')}")

    @staticmethod
    def _reference_error(field: str, ids: Sequence[uuid.UUID], message: str) -> ValidationError:
        return ValidationError(
            message,
            field_errors=[{"field": field, "message": f"{message}: {id}"} for id in ids]
        )

    async def _resolve_relations(
        self,
        data: Dict[str, Any],
        user: Optional[User],
        obj: Optional[Property] = None
    ) -> Dict[str, Any]:
        """
        Replace image and amenity IDs with the records they name.

        Images must be readable by the requester. Every amenity of the
        resulting listing must apply to its property type, so changing the
        type re-checks the amenities already attached.

        Raises:
            ValidationError: If a referenced record is missing or does not fit
        """
        image_ids = data.pop("image_ids", None)
        amenity_ids = data.pop("amenity_ids", None)

        if image_ids is not None:
            image_ids = list(dict.fromkeys(image_ids))
            images = await self.media_repo.get_many(image_ids, media_read(user))
            found = {image.id for image in images}
            missing = [id for id in image_ids if id not in found]
            if missing:
                raise self._reference_error("image_ids", missing, "Image not found")
            data["images"] = images

        if data.get("neighborhood_id") is not None:
            if not await self.neighborhood_repo.exists(data["neighborhood_id"]):
                raise self._reference_error("neighborhood_id", [data["neighborhood_id"]], "Neighborhood not found")

        if amenity_ids is not None:
            amenity_ids = list(dict.fromkeys(amenity_ids))
            amenities = await self.amenity_repo.get_many(amenity_ids)
            found = {amenity.id for amenity in amenities}
            missing = [id for id in amenity_ids if id not in found]
            if missing:
                raise self._reference_error("amenity_ids", missing, "Amenity not found")
            data["amenities"] = amenities
        elif obj is not None and "property_type" in data:
            amenities = list(obj.amenities)
        else:
            return data

        property_type = data.get("property_type") or obj.property_type
        mismatched = [amenity.id for amenity in amenities if not amenity.applies_to(property_type)]
        if mismatched:
            raise self._reference_error(
                "amenity_ids", mismatched, f"Amenity does not apply to {property_type.value} properties"
            )
        return data

    async def before_create(self, data: Dict[str, Any], user: Optional[User]) -> Dict[str, Any]:
        self._check_review_fields(data, user)
        data = {key: value for key, value in data.items() if value is not None}
        data["owner_id"] = user.id
        data = await self._resolve_relations(data, user)
        return await super().before_create(data, user)

    async def before_update(self, obj: Property, data: Dict[str, Any], user: Optional[User]) -> Dict[str, Any]:
        self._check_review_fields(data, user)
        data.pop("owner_id", None)
        data = await self._resolve_relations(data, user, obj)
        return await super().before_update(obj, data, user)

    async def after_change(self, obj: Property, previous: Optional[Dict[str, Any]], operation: str) -> None:
        was_approved = previous is not None and previous.get("status") == PropertyStatus.APPROVED

        if obj.status == PropertyStatus.APPROVED:
            logger.info(f"Revalidating property at path: /properties/{obj.slug}")
            self.revalidate()
        elif was_approved:
            logger.info(f"Revalidating old property at path: /properties/{previous.get('slug')}")
            self.revalidate()

    async def search(
        self,
        filters: PropertySearchFilters,
        user: Optional[User],
        page: int = 1,
        limit: int = 10,
        order_by: Optional[str] = None
    ) -> Tuple[List[Property], int]:
        """Search listings visible to the requester."""
        return await self.list(user, where=filters.clauses(), page=page, limit=limit, order_by=order_by)

    async def review(
        self,
        id: uuid.UUID,
        status: PropertyStatus,
        user: User,
        admin_notes: Optional[str] = None
    ) -> Property:
        """Set the review status of a listing; only administrators may."""
        data: Dict[str, Any] = {"status": status}
        if admin_notes is not None:
            data["admin_notes"] = admin_notes
        return await self.update(id, data, user)
