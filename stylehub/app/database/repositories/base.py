"""Base repository implementation for database operations.

This module provides a generic repository pattern implementation with common
database operations that can be inherited by specific repositories.

Features:
- Generic CRUD operations
- Predicate-list filtering shared by counts and page fetches
- Offset pagination and ordering
"""

from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from app.core.logging import get_logger
from app.database.session import with_tracing
from app.models.database.base import Base

# Type variable for models
ModelType = TypeVar("ModelType", bound=Base)
logger = get_logger(__name__)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations."""

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """Initialize repository with model and session.

        Args:
            model: SQLAlchemy model class
            session: AsyncSession instance
        """
        self.model = model
        self.session = session

    @with_tracing
    async def create(self, **kwargs) -> ModelType:
        """Create a new record.

        Args:
            **kwargs: Model field values

        Returns:
            Created model instance
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        return instance

    @with_tracing
    async def get(self, id: Any) -> Optional[ModelType]:
        """Get record by ID.

        Args:
            id: Record ID

        Returns:
            Model instance if found, None otherwise
        """
        return await self.session.get(self.model, id)

    @with_tracing
    async def get_multi(
        self,
        *,
        conditions: Sequence[ColumnElement] = (),
        skip: int = 0,
        limit: int = 100,
        order_by: Sequence[ColumnElement] = ()
    ) -> List[ModelType]:
        """Get multiple records with filtering and pagination.

        Args:
            conditions: Predicates combined with AND
            skip: Number of records to skip
            limit: Maximum number of records to return
            order_by: Ordering clauses

        Returns:
            List of model instances
        """
        query = select(self.model).where(*conditions)
        if order_by:
            query = query.order_by(*order_by)
        query = query.offset(skip).limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    @with_tracing
    async def count(self, conditions: Sequence[ColumnElement] = ()) -> int:
        """Get count of records matching the same predicates as ``get_multi``."""
        query = select(func.count()).select_from(self.model).where(*conditions)
        result = await self.session.execute(query)
        return result.scalar_one()

    @with_tracing
    async def update(self, instance: ModelType, values: Dict[str, Any]) -> ModelType:
        """Apply ``values`` to a loaded instance and flush."""
        for field, value in values.items():
            setattr(instance, field, value)
        await self.session.flush()
        return instance

    @with_tracing
    async def delete(self, instance: ModelType) -> None:
        await self.session.delete(instance)
        await self.session.flush()

    @with_tracing
    async def exists(self, *conditions: ColumnElement) -> bool:
        """Check if any record matches the given predicates."""
        query = select(self.model.id).where(*conditions).limit(1)
        result = await self.session.execute(query)
        return result.first() is not None
