"""
Generic collection service.

Applies a collection's access predicates to every operation and runs its
lifecycle hooks around create, update and delete.
"""

from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple
from sqlalchemy import inspect
from sqlalchemy.sql.elements import ColumnElement
from noticeboard.access import AccessPredicate, AccessResult, access_denied, ensure_allowed, anyone, authenticated
from noticeboard.models.user import User
from noticeboard.repositories.base import BaseRepository, ModelType
from noticeboard.utils.exceptions import NotFoundError
import uuid
import logging

logger = logging.getLogger(__name__)


def snapshot(obj: Any) -> Dict[str, Any]:
    """Column values of a loaded record, taken before it is modified."""
    return {attr.key: getattr(obj, attr.key) for attr in inspect(obj).mapper.column_attrs}


class CollectionService(Generic[ModelType]):
    """
    CRUD over one collection, guarded by access predicates.

    Subclasses set ``resource_name`` and the four predicates, and override
    the hooks they need:

    - ``before_create(data, user)`` / ``before_update(obj, data, user)`` may
      rewrite the incoming data
    - ``after_change(obj, previous, operation)`` runs after create/update,
      ``previous`` is the column snapshot before an update (None on create)
    - ``after_delete(obj)`` runs after a delete
    """

    resource_name: str = "Document"

    read_access: AccessPredicate = staticmethod(anyone)
    create_access: AccessPredicate = staticmethod(authenticated)
    update_access: AccessPredicate = staticmethod(authenticated)
    delete_access: AccessPredicate = staticmethod(authenticated)

    def __init__(self, repository: BaseRepository[ModelType]):
        self.repository = repository
        self.db = repository.db

    @property
    def _action_name(self) -> str:
        return self.resource_name.lower()

    async def _resolve(
        self,
        id: uuid.UUID,
        access: AccessResult,
        user: Optional[User],
        action: str
    ) -> ModelType:
        """
        Load a single record through an access filter.

        Raises:
            NotFoundError: If no record has this ID
            UnauthorizedError / InsufficientPermissionsError: If the record
                exists but the filter excludes it
        """
        obj = await self.repository.get_by_id(id, access)
        if obj is not None:
            return obj

        if access is not True and await self.repository.exists(id):
            logger.warning(f"{action} denied on {self.resource_name} {id}")
            raise access_denied(user, action)

        raise NotFoundError(self.resource_name, str(id))

    async def get(self, id: uuid.UUID, user: Optional[User]) -> ModelType:
        action = f"read {self._action_name}"
        access = ensure_allowed(self.read_access(user), user, action)
        return await self._resolve(id, access, user, action)

    async def list(
        self,
        user: Optional[User],
        where: Sequence[ColumnElement[bool]] = (),
        page: int = 1,
        limit: int = 10,
        order_by: Optional[str] = None
    ) -> Tuple[List[ModelType], int]:
        """
        List one page of records visible to the requester.

        Returns:
            Tuple of (records, total matching records)
        """
        access = ensure_allowed(self.read_access(user), user, f"read {self._action_name}")
        skip = (page - 1) * limit
        return await self.repository.find_page(
            where=where, access=access, skip=skip, limit=limit, order_by=order_by
        )

    async def create(self, data: Dict[str, Any], user: Optional[User]) -> ModelType:
        ensure_allowed(self.create_access(user), user, f"create {self._action_name}")

        data = await self.before_create(dict(data), user)
        obj = await self.repository.create(data)
        logger.info(f"Created {self.resource_name} {obj.id}")

        await self.after_change(obj, None, "create")
        return obj

    async def update(self, id: uuid.UUID, data: Dict[str, Any], user: Optional[User]) -> ModelType:
        action = f"update {self._action_name}"
        access = ensure_allowed(self.update_access(user), user, action)
        obj = await self._resolve(id, access, user, action)

        previous = snapshot(obj)
        data = await self.before_update(obj, dict(data), user)
        obj = await self.repository.update(obj, data)
        logger.info(f"Updated {self.resource_name} {obj.id}")

        await self.after_change(obj, previous, "update")
        return obj

    async def delete(self, id: uuid.UUID, user: Optional[User]) -> ModelType:
        action = f"delete {self._action_name}"
        access = ensure_allowed(self.delete_access(user), user, action)
        obj = await self._resolve(id, access, user, action)

        await self.repository.delete(obj)
        logger.info(f"Deleted {self.resource_name} {id}")

        await self.after_delete(obj)
        return obj

    async def before_create(self, data: Dict[str, Any], user: Optional[User]) -> Dict[str, Any]:
        return data

    async def before_update(self, obj: ModelType, data: Dict[str, Any], user: Optional[User]) -> Dict[str, Any]:
        return data

    async def after_change(self, obj: ModelType, previous: Optional[Dict[str, Any]], operation: str) -> None:
        return None

    async def after_delete(self, obj: ModelType) -> None:
        return None
