"""Read-only workflow graph routes."""

from typing import Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.database import get_db
from ..services.workflow_sync import WorkflowSyncService


router = APIRouter(prefix="/api/workflows", tags=["workflows"])


class WorkflowStatusSchema(BaseModel):
    id: str
    workflow_id: str
    name: str
    key: str
    icon: Optional[str] = None
    color: Optional[str] = None
    status_type: str
    description: Optional[str] = None
    position: int
    position_x: int
    position_y: int
    is_initial: bool
    is_final: bool


class WorkflowTransitionSchema(BaseModel):
    id: str
    workflow_id: str
    from_status_id: str
    to_status_id: str
    name: Optional[str] = None


@router.get("/{workflow_id}/statuses", response_model=list[WorkflowStatusSchema])
async def get_workflow_statuses(
    workflow_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Get the statuses of a workflow ordered by position."""
    statuses = await WorkflowSyncService(db).list_workflow_statuses(workflow_id)
    return [
        WorkflowStatusSchema(
            id=s.id,
            workflow_id=s.workflow_id,
            name=s.name,
            key=s.key,
            icon=s.icon,
            color=s.color,
            status_type=s.status_type,
            description=s.description,
            position=s.position,
            position_x=s.position_x,
            position_y=s.position_y,
            is_initial=bool(s.is_initial),
            is_final=bool(s.is_final),
        )
        for s in statuses
    ]


@router.get("/{workflow_id}/transitions", response_model=list[WorkflowTransitionSchema])
async def get_workflow_transitions(
    workflow_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Get the transitions of a workflow."""
    transitions = await WorkflowSyncService(db).list_workflow_transitions(workflow_id)
    return [
        WorkflowTransitionSchema(
            id=t.id,
            workflow_id=t.workflow_id,
            from_status_id=t.from_status_id,
            to_status_id=t.to_status_id,
            name=t.name,
        )
        for t in transitions
    ]
