"""Synchronization between project columns and workflow statuses.

A project column mirrors a workflow status when both live in the project's
workflow and either their names or their normalized keys are equal. There is
no stored link between the two, so creating a column adds a matching status
when none exists, and deleting a column removes every matching status along
with the transitions that touch it.

Both paths are best-effort: they never raise, and report what happened
through a SyncResult that the caller is expected to log.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_config
from ..models.column import CustomColumn
from ..models.workflow import WorkflowStatus, WorkflowTransition
from ..utils.keys import normalize_status_key
from .positions import allocate_status_position, status_canvas_position
from .store import EntityStore, EntityStores, NotFoundError

logger = logging.getLogger(__name__)


class SyncAction(str, Enum):
    SKIPPED = "skipped"
    NO_WORKFLOW = "no_workflow"
    MATCHED = "matched"
    CREATED = "created"
    CASCADED = "cascaded"
    FAILED = "failed"


@dataclass
class SyncResult:
    """Outcome of propagating a column change to the status graph."""

    action: SyncAction
    workflow_id: Optional[str] = None
    status_ids: list[str] = field(default_factory=list)
    transition_ids: list[str] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class CascadePlan:
    """Everything a column deletion has to remove, transitions first."""

    workflow_id: str
    status_ids: list[str] = field(default_factory=list)
    transition_ids: list[str] = field(default_factory=list)


class WorkflowSyncService:
    """Keeps workflow statuses in step with project columns."""

    def __init__(self, db: AsyncSession, stores: Optional[EntityStores] = None):
        self.db = db
        self.stores = stores or EntityStores(db)
        self.config = get_config().sync

    @staticmethod
    def should_sync_created(project_id: Optional[str], workflow_id: Optional[str]) -> bool:
        """Only project columns propagate; standalone workflow columns do not."""
        return bool(project_id) and not workflow_id

    async def resolve_workflow_id(self, project_id: str) -> Optional[str]:
        """Workflow linked to a project, if any. Raises NotFoundError for unknown projects."""
        project = await self.stores.projects.get(project_id)
        return project.workflow_id or None

    async def find_matching_statuses(self, workflow_id: str, name: str) -> list[WorkflowStatus]:
        """Statuses in the workflow whose name or key matches the column name."""
        key = normalize_status_key(name)
        return await self.stores.statuses.list(
            WorkflowStatus.workflow_id == workflow_id,
            or_(WorkflowStatus.name == name, WorkflowStatus.key == key),
            order_by=WorkflowStatus.position,
        )

    async def list_workflow_statuses(self, workflow_id: str) -> list[WorkflowStatus]:
        return await self.stores.statuses.list(
            WorkflowStatus.workflow_id == workflow_id,
            order_by=WorkflowStatus.position,
        )

    async def list_workflow_transitions(self, workflow_id: str) -> list[WorkflowTransition]:
        return await self.stores.transitions.list(
            WorkflowTransition.workflow_id == workflow_id,
            order_by=WorkflowTransition.created_at,
        )

    # Creation

    async def sync_created_column(self, column: CustomColumn) -> SyncResult:
        """Create a status mirroring a newly created project column."""
        if not self.config.enabled:
            return SyncResult(action=SyncAction.SKIPPED)
        if not self.should_sync_created(column.project_id, column.workflow_id):
            return SyncResult(action=SyncAction.SKIPPED)

        try:
            return await self._create_matching_status(column)
        except Exception as e:
            return SyncResult(action=SyncAction.FAILED, error=e)

    async def _create_matching_status(self, column: CustomColumn) -> SyncResult:
        workflow_id = await self.resolve_workflow_id(column.project_id)
        if not workflow_id:
            return SyncResult(action=SyncAction.NO_WORKFLOW)

        existing = await self.find_matching_statuses(workflow_id, column.name)
        if existing:
            return SyncResult(
                action=SyncAction.MATCHED,
                workflow_id=workflow_id,
                status_ids=[s.id for s in existing],
            )

        position = await allocate_status_position(self.stores.statuses, workflow_id)
        position_x, position_y = status_canvas_position(position)

        status = await self.stores.statuses.create(
            workflow_id=workflow_id,
            name=column.name,
            key=normalize_status_key(column.name),
            icon=column.icon or self.config.default_status_icon,
            color=column.color or self.config.default_status_color,
            status_type=self.config.status_type,
            description=None,
            position=position,
            position_x=position_x,
            position_y=position_y,
            is_initial=False,
            is_final=False,
        )
        logger.info(
            f"Created workflow status {status.key} in workflow {workflow_id} "
            f"for column {column.id}"
        )
        return SyncResult(
            action=SyncAction.CREATED,
            workflow_id=workflow_id,
            status_ids=[status.id],
        )

    # Deletion

    async def cascade_deleted_column(self, name: str, project_id: str) -> SyncResult:
        """Remove statuses mirroring a deleted project column, and their transitions."""
        if not self.config.enabled:
            return SyncResult(action=SyncAction.SKIPPED)

        try:
            workflow_id = await self.resolve_workflow_id(project_id)
            if not workflow_id:
                return SyncResult(action=SyncAction.NO_WORKFLOW)

            plan = await self.plan_cascade(workflow_id, name)
            return await self.execute_cascade(plan)
        except Exception as e:
            return SyncResult(action=SyncAction.FAILED, error=e)

    async def plan_cascade(self, workflow_id: str, name: str) -> CascadePlan:
        """Collect every matching status and every transition incident to one."""
        plan = CascadePlan(workflow_id=workflow_id)

        for status in await self.find_matching_statuses(workflow_id, name):
            plan.status_ids.append(status.id)
            transitions = await self.stores.transitions.list(
                WorkflowTransition.workflow_id == workflow_id,
                or_(
                    WorkflowTransition.from_status_id == status.id,
                    WorkflowTransition.to_status_id == status.id,
                ),
            )
            for transition in transitions:
                # An edge between two matched statuses shows up twice
                if transition.id not in plan.transition_ids:
                    plan.transition_ids.append(transition.id)

        return plan

    async def execute_cascade(self, plan: CascadePlan) -> SyncResult:
        """Delete the planned transitions, then the planned statuses."""
        deleted_transitions = []
        for transition_id in plan.transition_ids:
            if await self._delete_if_present(self.stores.transitions, transition_id):
                deleted_transitions.append(transition_id)

        deleted_statuses = []
        for status_id in plan.status_ids:
            if await self._delete_if_present(self.stores.statuses, status_id):
                deleted_statuses.append(status_id)

        if plan.status_ids:
            logger.info(
                f"Removed {len(deleted_statuses)} statuses and {len(deleted_transitions)} "
                f"transitions from workflow {plan.workflow_id}"
            )
        return SyncResult(
            action=SyncAction.CASCADED,
            workflow_id=plan.workflow_id,
            status_ids=deleted_statuses,
            transition_ids=deleted_transitions,
        )

    async def _delete_if_present(self, store: EntityStore, entity_id: str) -> bool:
        """Delete an entity; one that is already gone counts as done."""
        try:
            await store.delete(entity_id)
        except NotFoundError:
            logger.debug(f"{store.collection} {entity_id} already deleted")
            return False
        return True
