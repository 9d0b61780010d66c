from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import is_unique_violation
from src.app.repositories.membership_repository import IProjectMembershipRepository
from src.domain.entities import MembershipStatus, ProjectMembership
from src.domain.errors import UniqueViolation


class ProjectMembershipRepository(IProjectMembershipRepository):
    """Project membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, project_id: UUID, user_id: UUID) -> Optional[ProjectMembership]:
        """Get membership by project and user"""
        stmt = select(ProjectMembership).where(
            ProjectMembership.project_id == project_id,
            ProjectMembership.user_id == user_id,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_project_id(self, project_id: UUID) -> List[ProjectMembership]:
        """Get all memberships of a project"""
        stmt = (
            select(ProjectMembership)
            .where(ProjectMembership.project_id == project_id)
            .order_by(col(ProjectMembership.joined_at))
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_active_by_user_id(self, user_id: UUID) -> List[ProjectMembership]:
        """Get all active memberships of a user"""
        stmt = select(ProjectMembership).where(
            ProjectMembership.user_id == user_id,
            ProjectMembership.status == MembershipStatus.active,
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, membership: ProjectMembership) -> ProjectMembership:
        """Insert a membership; raises UniqueViolation if one exists"""
        self.session.add(membership)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            raise UniqueViolation(
                "project_members",
                f"project_id={membership.project_id} user_id={membership.user_id}",
            ) from exc
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: ProjectMembership) -> ProjectMembership:
        """Persist status / role changes"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def delete(self, membership: ProjectMembership) -> None:
        """Delete a membership row"""
        await self.session.delete(membership)
        await self.session.flush()
