"""
ProjectMembership Entity

Links a User to a Project with a role and a lifecycle status.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import MembershipStatus


class ProjectMembership(SQLModel, table=True):
    """
    ProjectMembership entity.

    Business Rules:
    - (project_id, user_id) is unique: at most one row per user per project
    - Created pending by a direct invitation, active for the owner and for
      invite-link joins
    - Declined and removed memberships are deleted, not soft-deleted
    """

    __tablename__ = "project_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    role_id: int = Field(foreign_key="roles.id", nullable=False)

    status: MembershipStatus = Field(default=MembershipStatus.pending)

    joined_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_project_member_project_user", "project_id", "user_id", unique=True),
        Index("idx_project_member_status", "status"),
    )

    @property
    def is_active(self) -> bool:
        return self.status == MembershipStatus.active
