"""Uniform document-style access to the board collections."""

from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.column import CustomColumn
from ..models.database import Base
from ..models.project import Project
from ..models.workflow import WorkflowStatus, WorkflowTransition


ModelT = TypeVar("ModelT", bound=Base)


class NotFoundError(Exception):
    """Raised when an entity does not exist in its collection."""

    def __init__(self, collection: str, entity_id: str):
        self.collection = collection
        self.entity_id = entity_id
        super().__init__(f"{collection} {entity_id} not found")


class EntityStore(Generic[ModelT]):
    """CRUD and filtered listing for one collection.

    Filters are SQLAlchemy boolean expressions and are ANDed together;
    use ``or_()`` to express alternatives within a filter.
    """

    def __init__(self, db: AsyncSession, model: type[ModelT]):
        self.db = db
        self.model = model

    @property
    def collection(self) -> str:
        return self.model.__tablename__

    async def list(
        self,
        *filters: Any,
        order_by: Any = None,
        limit: Optional[int] = None,
    ) -> list[ModelT]:
        """List entities matching every filter."""
        query = select(self.model)
        if filters:
            query = query.where(*filters)
        if order_by is not None:
            query = query.order_by(order_by)
        if limit is not None:
            query = query.limit(limit)

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get(self, entity_id: str) -> ModelT:
        """Get an entity by id, raising NotFoundError if absent."""
        result = await self.db.execute(
            select(self.model).where(self.model.id == entity_id)
        )
        entity = result.scalar_one_or_none()
        if entity is None:
            raise NotFoundError(self.collection, entity_id)
        return entity

    async def create(self, **data: Any) -> ModelT:
        """Create an entity; the id is assigned by the store."""
        entity = self.model(**data)
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def update(self, entity_id: str, changes: dict[str, Any]) -> ModelT:
        """Apply a partial update."""
        entity = await self.get(entity_id)
        for field, value in changes.items():
            setattr(entity, field, value)
        await self.db.flush()
        return entity

    async def delete(self, entity_id: str) -> None:
        """Delete an entity, raising NotFoundError if absent."""
        entity = await self.get(entity_id)
        await self.db.delete(entity)
        await self.db.flush()


class EntityStores:
    """The collections a board request works against."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.columns: EntityStore[CustomColumn] = EntityStore(db, CustomColumn)
        self.projects: EntityStore[Project] = EntityStore(db, Project)
        self.statuses: EntityStore[WorkflowStatus] = EntityStore(db, WorkflowStatus)
        self.transitions: EntityStore[WorkflowTransition] = EntityStore(db, WorkflowTransition)
