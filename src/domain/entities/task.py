"""
Task Entity

Minimal view of a task: what the dependency graph and the permission gate
need to know about it.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import TaskStatus


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)
    title: str = Field(max_length=255)
    status: TaskStatus = Field(default=TaskStatus.todo)

    creator_id: UUID = Field(foreign_key="users.id", nullable=False)
    assignee_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_task_project_status", "project_id", "status"),)

    @property
    def is_done(self) -> bool:
        return self.status == TaskStatus.done
