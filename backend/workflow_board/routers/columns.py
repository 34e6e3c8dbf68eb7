"""Custom columns API routes."""

from typing import Optional
from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.database import get_db
from ..services.column import ColumnService


router = APIRouter(prefix="/api/custom-columns", tags=["custom-columns"])


class ColumnSchema(BaseModel):
    id: str
    workspace_id: str
    project_id: Optional[str] = None
    workflow_id: Optional[str] = None
    name: str
    icon: Optional[str] = None
    color: Optional[str] = None
    position: int


class CreateColumnRequest(BaseModel):
    name: str
    workspace_id: str
    project_id: Optional[str] = None
    workflow_id: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    position: Optional[int] = None


class UpdateColumnRequest(BaseModel):
    name: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    position: Optional[int] = None


class DeleteColumnResponse(BaseModel):
    id: str
    message: str = "Column deleted"


def column_to_schema(column) -> ColumnSchema:
    """Convert a CustomColumn model to ColumnSchema."""
    return ColumnSchema(
        id=column.id,
        workspace_id=column.workspace_id,
        project_id=column.project_id,
        workflow_id=column.workflow_id,
        name=column.name,
        icon=column.icon,
        color=column.color,
        position=column.position,
    )


@router.get("", response_model=list[ColumnSchema])
async def get_columns(
    workspace_id: str,
    project_id: Optional[str] = None,
    workflow_id: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """Get the columns of a workspace, optionally narrowed to a project or workflow."""
    column_service = ColumnService(db)
    columns = await column_service.list_columns(
        workspace_id=workspace_id,
        project_id=project_id,
        workflow_id=workflow_id,
    )
    return [column_to_schema(c) for c in columns]


@router.post("", response_model=ColumnSchema)
async def create_column(
    request: CreateColumnRequest,
    db: AsyncSession = Depends(get_db),
):
    """Create a new column."""
    if not request.name.strip():
        raise HTTPException(status_code=400, detail="Name is required")
    if not request.workspace_id.strip():
        raise HTTPException(status_code=400, detail="Workspace is required")

    column_service = ColumnService(db)
    column = await column_service.create_column(
        workspace_id=request.workspace_id,
        name=request.name,
        project_id=request.project_id,
        workflow_id=request.workflow_id,
        icon=request.icon,
        color=request.color,
        position=request.position,
    )

    return column_to_schema(column)


@router.patch("/{column_id}", response_model=ColumnSchema)
async def update_column(
    column_id: str,
    request: UpdateColumnRequest,
    db: AsyncSession = Depends(get_db),
):
    """Partially update a column."""
    changes = request.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(status_code=400, detail="No fields to update")

    if "name" in changes:
        if changes["name"] is None or not changes["name"].strip():
            raise HTTPException(status_code=400, detail="Name cannot be empty")
    if changes.get("position", 0) is None:
        raise HTTPException(status_code=400, detail="Position cannot be null")

    column_service = ColumnService(db)
    column = await column_service.update_column(column_id, changes)

    if column is None:
        raise HTTPException(status_code=404, detail="Column not found")

    return column_to_schema(column)


@router.delete("/{column_id}", response_model=DeleteColumnResponse)
async def delete_column(
    column_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Delete a column along with the workflow status it mirrors."""
    column_service = ColumnService(db)
    success = await column_service.delete_column(column_id)

    if not success:
        raise HTTPException(status_code=404, detail="Column not found")

    return DeleteColumnResponse(id=column_id)
