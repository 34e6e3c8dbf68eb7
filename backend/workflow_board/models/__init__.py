"""Database models for Workflow Board."""

from .database import Base, get_db, init_db, close_db
from .column import CustomColumn
from .project import Project
from .workflow import StatusType, WorkflowStatus, WorkflowTransition

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "CustomColumn",
    "Project",
    "StatusType",
    "WorkflowStatus",
    "WorkflowTransition",
]
