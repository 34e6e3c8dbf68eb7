"""Column service for managing custom Kanban columns."""

import logging
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, AsyncSessionTransaction

from ..models.column import CustomColumn
from .positions import allocate_column_position
from .store import EntityStores, NotFoundError
from .workflow_sync import SyncResult, WorkflowSyncService

logger = logging.getLogger(__name__)


# Fields a column patch may touch
UPDATABLE_FIELDS = ("name", "icon", "color", "position")


def column_scope_filters(
    workspace_id: str,
    project_id: Optional[str] = None,
    workflow_id: Optional[str] = None,
) -> list[Any]:
    """Filters selecting the columns of a workspace, narrowed by project and/or workflow."""
    filters = [CustomColumn.workspace_id == workspace_id]
    if project_id:
        filters.append(CustomColumn.project_id == project_id)
    if workflow_id:
        filters.append(CustomColumn.workflow_id == workflow_id)
    return filters


class ColumnService:
    """Service for managing custom columns and their workflow statuses."""

    def __init__(self, db: AsyncSession, sync: Optional[WorkflowSyncService] = None):
        self.db = db
        self.stores = EntityStores(db)
        self.sync = sync or WorkflowSyncService(db, self.stores)

    async def list_columns(
        self,
        workspace_id: str,
        project_id: Optional[str] = None,
        workflow_id: Optional[str] = None,
    ) -> list[CustomColumn]:
        """Get the columns of a scope ordered by position."""
        return await self.stores.columns.list(
            *column_scope_filters(workspace_id, project_id, workflow_id),
            order_by=CustomColumn.position.asc(),
        )

    async def get_column(self, column_id: str) -> Optional[CustomColumn]:
        """Get a column by ID."""
        try:
            return await self.stores.columns.get(column_id)
        except NotFoundError:
            return None

    async def create_column(
        self,
        workspace_id: str,
        name: str,
        project_id: Optional[str] = None,
        workflow_id: Optional[str] = None,
        icon: Optional[str] = None,
        color: Optional[str] = None,
        position: Optional[int] = None,
    ) -> CustomColumn:
        """Create a column and mirror it as a workflow status when it belongs to a project."""
        # If position not specified, add at the end of the scope
        if position is None:
            filters = column_scope_filters(workspace_id, project_id, workflow_id)
            position = await allocate_column_position(self.stores.columns, filters)

        data = {
            "workspace_id": workspace_id,
            "name": name,
            "icon": icon,
            "color": color,
            "position": position,
        }
        if project_id:
            data["project_id"] = project_id
        if workflow_id:
            data["workflow_id"] = workflow_id

        column = await self.stores.columns.create(**data)
        # The column stands on its own whatever happens during sync
        await self.db.commit()

        if self.sync.should_sync_created(project_id, workflow_id):
            savepoint = await self.db.begin_nested()
            result = await self.sync.sync_created_column(column)
            await self._settle_sync(
                savepoint, result, "Error syncing custom column to workflow status"
            )

        return column

    async def update_column(
        self, column_id: str, changes: dict[str, Any]
    ) -> Optional[CustomColumn]:
        """Apply a partial update to a column."""
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update column fields: {', '.join(sorted(unknown))}")

        try:
            return await self.stores.columns.update(column_id, changes)
        except NotFoundError:
            return None

    async def delete_column(self, column_id: str) -> bool:
        """Delete a column and cascade to the workflow statuses it mirrors."""
        column_name: Optional[str] = None
        column_project_id: Optional[str] = None

        try:
            column = await self.get_column(column_id)
        except SQLAlchemyError as e:
            logger.warning(f"Could not read column {column_id} before deleting it: {e}")
            column = None
        if column is not None:
            column_name = column.name
            column_project_id = column.project_id

        try:
            await self.stores.columns.delete(column_id)
        except NotFoundError:
            return False
        await self.db.commit()

        if column_name and column_project_id:
            savepoint = await self.db.begin_nested()
            result = await self.sync.cascade_deleted_column(column_name, column_project_id)
            await self._settle_sync(
                savepoint, result, "Error cleaning up workflow status after column delete"
            )

        return True

    async def _settle_sync(
        self, savepoint: AsyncSessionTransaction, result: SyncResult, failure_message: str
    ) -> bool:
        """Log a sync outcome; a failed sync discards only what it wrote."""
        if result.ok:
            await savepoint.commit()
            logger.debug(f"Column sync finished: {result.action.value}")
            return True

        await savepoint.rollback()
        logger.error(f"{failure_message}: {result.error}")
        return False
