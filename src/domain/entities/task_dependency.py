"""
TaskDependency Entity

Directed edge: dependent_task_id is blocked by / related to depends_on_task_id.
"""

from datetime import datetime
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import DependencyType


class TaskDependency(SQLModel, table=True):
    """
    TaskDependency entity.

    Business Rules:
    - (dependent_task_id, depends_on_task_id) is the primary key
    - No self-loops, both endpoints in the same project
    - The graph stays acyclic
    - Created and deleted, never updated in place
    """

    __tablename__ = "task_dependencies"

    dependent_task_id: UUID = Field(foreign_key="tasks.id", primary_key=True)
    depends_on_task_id: UUID = Field(foreign_key="tasks.id", primary_key=True)

    dependency_type: DependencyType = Field(default=DependencyType.blocks)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_task_dependency_depends_on", "depends_on_task_id"),)
