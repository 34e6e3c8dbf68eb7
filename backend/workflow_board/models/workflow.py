"""Workflow status graph models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base, generate_id


class StatusType(str, Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    CLOSED = "CLOSED"


class WorkflowStatus(Base):
    """Node in a workflow's status graph."""

    __tablename__ = "workflow_statuses"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    workflow_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    key: Mapped[str] = mapped_column(String(100), index=True, nullable=False)
    icon: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    color: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    status_type: Mapped[str] = mapped_column(
        String(50), default=StatusType.OPEN.value, nullable=False
    )
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Dense ordering; canvas coordinates derive from it for auto-created nodes
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    position_x: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    position_y: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    is_initial: Mapped[bool] = mapped_column(Boolean, default=False)
    is_final: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )


class WorkflowTransition(Base):
    """Directed edge between two statuses of the same workflow.

    Status ids are plain strings; the database does not enforce them.
    """

    __tablename__ = "workflow_transitions"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    workflow_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    from_status_id: Mapped[str] = mapped_column(String(32), index=True, nullable=False)
    to_status_id: Mapped[str] = mapped_column(String(32), index=True, nullable=False)
    name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
