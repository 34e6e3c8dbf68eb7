"""Custom column model for project and workflow boards."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base, generate_id


class CustomColumn(Base):
    """Kanban column scoped to a workspace and a project or a standalone workflow.

    Nothing enforces that only one of project_id/workflow_id is set.
    """

    __tablename__ = "custom_columns"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    workspace_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    project_id: Mapped[Optional[str]] = mapped_column(String(64), index=True, nullable=True)
    workflow_id: Mapped[Optional[str]] = mapped_column(String(64), index=True, nullable=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    icon: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    color: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )
