from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.task_repository import ITaskRepository
from src.domain.entities import Task


class TaskRepository(ITaskRepository):
    """Task repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        """Get task by ID"""
        stmt = select(Task).where(Task.id == task_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, task_ids: List[UUID]) -> List[Task]:
        """Get all tasks whose ID is in task_ids"""
        if not task_ids:
            return []
        stmt = select(Task).where(col(Task.id).in_(task_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_ids_by_project_id(self, project_id: UUID) -> List[UUID]:
        """IDs of every task in a project"""
        stmt = select(Task.id).where(Task.project_id == project_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, task: Task) -> Task:
        """Create a new task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def update(self, task: Task) -> Task:
        """Update existing task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task
