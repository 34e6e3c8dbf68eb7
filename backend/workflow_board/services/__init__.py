"""Services for Workflow Board."""

from .store import EntityStore, EntityStores, NotFoundError
from .column import ColumnService, column_scope_filters
from .workflow_sync import CascadePlan, SyncAction, SyncResult, WorkflowSyncService

__all__ = [
    "EntityStore",
    "EntityStores",
    "NotFoundError",
    "ColumnService",
    "column_scope_filters",
    "CascadePlan",
    "SyncAction",
    "SyncResult",
    "WorkflowSyncService",
]
