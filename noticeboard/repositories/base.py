"""
Base repository class with common CRUD operations using async SQLAlchemy.
Every read accepts an access result so collection predicates become part of the query.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.sql.elements import ColumnElement
from noticeboard.access.base import AccessResult, as_clause
from noticeboard.database import Base
from typing import TypeVar, Generic, Optional, List, Dict, Any, Type, Sequence, Tuple
import uuid
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository class providing common CRUD operations.
    Uses async SQLAlchemy for all database operations with proper error handling.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize repository with model class and database session.

        Args:
            model: SQLAlchemy model class
            db: Async database session
        """
        self.model = model
        self.db = db

    def _order_clause(self, order_by: Optional[str]):
        """Translate 'field' / '-field' into an ORDER BY clause."""
        if order_by:
            descending = order_by.startswith("-")
            field_name = order_by.lstrip("-")
            if hasattr(self.model, field_name):
                column = getattr(self.model, field_name)
                return column.desc() if descending else column.asc()
        return self.model.created_at.desc()

    async def create(self, obj_in: Dict[str, Any]) -> ModelType:
        """
        Create a new record in the database.

        Args:
            obj_in: Dictionary of field values for the new record

        Returns:
            Created model instance
        """
        try:
            db_obj = self.model(**obj_in)
            self.db.add(db_obj)
            await self.db.commit()
            await self.db.refresh(db_obj)
            logger.debug(f"Created {self.model.__name__} with id: {db_obj.id}")
            return db_obj
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to create {self.model.__name__}: {e}")
            raise

    async def get_by_id(self, id: uuid.UUID, access: AccessResult = True) -> Optional[ModelType]:
        """
        Get a record by its ID, restricted by an access result.

        Returns:
            Model instance if found and visible, None otherwise
        """
        try:
            query = select(self.model).where(self.model.id == id, as_clause(access))
            result = await self.db.execute(query)
            obj = result.scalar_one_or_none()

            if obj:
                logger.debug(f"Retrieved {self.model.__name__} with id: {id}")
            else:
                logger.debug(f"{self.model.__name__} with id {id} not found")

            return obj
        except Exception as e:
            logger.error(f"Failed to get {self.model.__name__} by id {id}: {e}")
            raise

    async def find(
        self,
        where: Sequence[ColumnElement[bool]] = (),
        access: AccessResult = True,
        skip: int = 0,
        limit: Optional[int] = 100,
        order_by: Optional[str] = None
    ) -> List[ModelType]:
        """
        Get multiple records matching the given clauses.

        Args:
            where: Additional filter clauses
            access: Access result of the requester
            skip: Number of records to skip (for pagination)
            limit: Maximum number of records to return, None for no limit
            order_by: Field name to order by (prefix with '-' for descending)

        Returns:
            List of model instances
        """
        try:
            query = (
                select(self.model)
                .where(as_clause(access), *where)
                .order_by(self._order_clause(order_by))
                .offset(skip)
            )
            if limit is not None:
                query = query.limit(limit)

            result = await self.db.execute(query)
            objects = result.scalars().all()

            logger.debug(f"Retrieved {len(objects)} {self.model.__name__} records")
            return list(objects)
        except Exception as e:
            logger.error(f"Failed to get multiple {self.model.__name__} records: {e}")
            raise

    async def find_page(
        self,
        where: Sequence[ColumnElement[bool]] = (),
        access: AccessResult = True,
        skip: int = 0,
        limit: int = 10,
        order_by: Optional[str] = None
    ) -> Tuple[List[ModelType], int]:
        """Get one page of records together with the total number of matches."""
        items = await self.find(where=where, access=access, skip=skip, limit=limit, order_by=order_by)
        total = await self.count(where=where, access=access)
        return items, total

    async def find_columns(
        self,
        columns: Sequence[Any],
        where: Sequence[ColumnElement[bool]] = (),
        access: AccessResult = True,
        limit: Optional[int] = None,
        order_by: Optional[str] = None
    ) -> List[Any]:
        """Select only the given columns; returns result rows."""
        try:
            query = (
                select(*columns)
                .where(as_clause(access), *where)
                .order_by(self._order_clause(order_by))
            )
            if limit is not None:
                query = query.limit(limit)

            result = await self.db.execute(query)
            rows = result.all()
            logger.debug(f"Selected {len(rows)} {self.model.__name__} rows")
            return list(rows)
        except Exception as e:
            logger.error(f"Failed to select {self.model.__name__} columns: {e}")
            raise

    async def update(self, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        """
        Apply field values to a loaded record and persist them.

        Args:
            db_obj: Model instance to update
            obj_in: Dictionary of field values to update

        Returns:
            Refreshed model instance
        """
        try:
            for field, value in obj_in.items():
                setattr(db_obj, field, value)
            await self.db.commit()
            await self.db.refresh(db_obj)
            logger.debug(f"Updated {self.model.__name__} with id: {db_obj.id}")
            return db_obj
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to update {self.model.__name__} {db_obj.id}: {e}")
            raise

    async def delete(self, db_obj: ModelType) -> None:
        """Delete a loaded record."""
        try:
            await self.db.delete(db_obj)
            await self.db.commit()
            logger.debug(f"Deleted {self.model.__name__} with id: {db_obj.id}")
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to delete {self.model.__name__} {db_obj.id}: {e}")
            raise

    async def count(
        self,
        where: Sequence[ColumnElement[bool]] = (),
        access: AccessResult = True
    ) -> int:
        """
        Count records matching the given clauses.

        Returns:
            Number of matching records
        """
        try:
            query = select(func.count(self.model.id)).where(as_clause(access), *where)
            result = await self.db.execute(query)
            count = result.scalar()

            logger.debug(f"Counted {count} {self.model.__name__} records")
            return count
        except Exception as e:
            logger.error(f"Failed to count {self.model.__name__} records: {e}")
            raise

    async def exists(self, id: uuid.UUID) -> bool:
        """Check if a record exists by its ID, ignoring access."""
        try:
            query = select(func.count(self.model.id)).where(self.model.id == id)
            result = await self.db.execute(query)
            return result.scalar() > 0
        except Exception as e:
            logger.error(f"Failed to check existence of {self.model.__name__} {id}: {e}")
            raise

    async def get_by_field(self, field: str, value: Any) -> Optional[ModelType]:
        """
        Get a record by a specific field value.

        Raises:
            ValueError: If the field does not exist on the model
        """
        try:
            if not hasattr(self.model, field):
                raise ValueError(f"Field '{field}' does not exist on {self.model.__name__}")

            query = select(self.model).where(getattr(self.model, field) == value)
            result = await self.db.execute(query)
            obj = result.scalar_one_or_none()

            if obj:
                logger.debug(f"Retrieved {self.model.__name__} by {field}: {value}")
            else:
                logger.debug(f"{self.model.__name__} with {field}={value} not found")

            return obj
        except Exception as e:
            logger.error(f"Failed to get {self.model.__name__} by {field}={value}: {e}")
            raise
