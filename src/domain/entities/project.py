"""
Project Entity

Container for tasks and the unit of membership.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import ProjectStatus


class Project(SQLModel, table=True):
    """
    Project entity.

    Business Rules:
    - owner_id is the creator; their owner membership is created in the
      same transaction as the project
    - The owner membership can never be removed or demoted
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    status: ProjectStatus = Field(default=ProjectStatus.active)

    owner_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_project_status", "status"),)
