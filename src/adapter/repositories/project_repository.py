from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.project_repository import IProjectRepository
from src.domain.entities import Project


class ProjectRepository(IProjectRepository):
    """Project repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        stmt = select(Project).where(Project.id == project_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, project_ids: List[UUID]) -> List[Project]:
        """Get all projects whose ID is in project_ids"""
        if not project_ids:
            return []
        stmt = (
            select(Project)
            .where(col(Project.id).in_(project_ids))
            .order_by(col(Project.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def lock(self, project_id: UUID) -> Optional[Project]:
        """SELECT ... FOR UPDATE on the project row (ignored by SQLite)"""
        stmt = select(Project).where(Project.id == project_id).with_for_update()
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, project: Project) -> Project:
        """Create a new project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project
