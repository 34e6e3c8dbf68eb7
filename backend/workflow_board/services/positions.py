"""Ordering positions for columns and workflow statuses."""

from typing import Any, Optional

from .store import EntityStore
from ..models.workflow import WorkflowStatus


# Columns leave wide gaps so they can be reordered without renumbering
COLUMN_POSITION_STEP = 1000

# Canvas layout for auto-created status nodes
CANVAS_ORIGIN_X = 100
CANVAS_SPACING_X = 180
CANVAS_ROW_Y = 100


async def read_max_position(store: EntityStore, *filters: Any) -> Optional[int]:
    """Read the current highest position in a scope, or None if it is empty."""
    entities = await store.list(
        *filters,
        order_by=store.model.position.desc(),
        limit=1,
    )
    if not entities:
        return None
    return entities[0].position


def next_column_position(current_max: Optional[int]) -> int:
    if current_max is None:
        return COLUMN_POSITION_STEP
    return current_max + COLUMN_POSITION_STEP


def next_status_position(current_max: Optional[int]) -> int:
    if current_max is None:
        return 0
    return current_max + 1


async def allocate_column_position(store: EntityStore, filters: list[Any]) -> int:
    """Position for a new column appended to the scope given by filters."""
    return next_column_position(await read_max_position(store, *filters))


async def allocate_status_position(store: EntityStore, workflow_id: str) -> int:
    """Position for a new status appended to a workflow."""
    current_max = await read_max_position(store, WorkflowStatus.workflow_id == workflow_id)
    return next_status_position(current_max)


def status_canvas_position(position: int) -> tuple[int, int]:
    """Canvas (x, y) for an auto-placed status node."""
    return CANVAS_ORIGIN_X + position * CANVAS_SPACING_X, CANVAS_ROW_Y
