"""
InviteLink Entity

Reusable, capacity- and time-bounded token granting a fixed role.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class InviteLink(SQLModel, table=True):
    """
    InviteLink entity.

    Business Rules:
    - Token is opaque, high-entropy and unique per link
    - expires_at is computed once at creation; null means never expires
    - max_uses null means unlimited; uses_count never exceeds max_uses
    - Only uses_count is ever updated, links are never deleted
    """

    __tablename__ = "project_invite_links"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)
    created_by: UUID = Field(foreign_key="users.id", nullable=False)
    token: str = Field(unique=True, index=True, max_length=128)
    role_id: int = Field(foreign_key="roles.id", nullable=False)

    max_uses: Optional[int] = Field(default=None)
    uses_count: int = Field(default=0)

    expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_invite_link_expires_at", "expires_at"),)

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and now >= self.expires_at

    def is_exhausted(self) -> bool:
        return self.max_uses is not None and self.uses_count >= self.max_uses

    def is_usable(self, now: datetime) -> bool:
        return not self.is_expired(now) and not self.is_exhausted()
