"""
ActivityLog Entity

Append-only log of collaboration events.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class ActivityLog(SQLModel, table=True):
    """
    ActivityLog entity.

    Business Rules:
    - Immutable (never updated or deleted)
    - Written best-effort after the primary transition committed
    """

    __tablename__ = "activity_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(index=True)
    action: str = Field(max_length=100)  # e.g. "invite_member", "join_via_invite_link"
    entity_id: UUID = Field(index=True)
    entity_type: str = Field(max_length=50)  # "project", "task"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_activity_entity_action", "entity_id", "action"),
        Index("idx_activity_created_at", "created_at"),
    )
