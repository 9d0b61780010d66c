"""
Notification Entity

In-app notification for a single user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Notification(SQLModel, table=True):
    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    type: str = Field(max_length=50)  # "invite", "task_assigned", ...
    title: str = Field(max_length=255)
    message: str
    action_url: Optional[str] = Field(default=None, max_length=512)
    entity_type: Optional[str] = Field(default=None, max_length=50)
    entity_id: Optional[UUID] = Field(default=None)
    read: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_notification_user_read", "user_id", "read"),)
