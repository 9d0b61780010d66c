from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, or_
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import is_unique_violation
from src.app.repositories.task_dependency_repository import ITaskDependencyRepository
from src.domain.entities import TaskDependency
from src.domain.errors import UniqueViolation


class TaskDependencyRepository(ITaskDependencyRepository):
    """Task dependency edge repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(
        self, dependent_task_id: UUID, depends_on_task_id: UUID
    ) -> Optional[TaskDependency]:
        """Get a single edge"""
        stmt = select(TaskDependency).where(
            TaskDependency.dependent_task_id == dependent_task_id,
            TaskDependency.depends_on_task_id == depends_on_task_id,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_dependent(self, task_id: UUID) -> List[TaskDependency]:
        """Outgoing edges: what task_id depends on"""
        stmt = select(TaskDependency).where(TaskDependency.dependent_task_id == task_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_depends_on(self, task_id: UUID) -> List[TaskDependency]:
        """Incoming edges: what depends on task_id"""
        stmt = select(TaskDependency).where(TaskDependency.depends_on_task_id == task_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_touching(self, task_ids: List[UUID]) -> List[TaskDependency]:
        """Edges with either endpoint in task_ids"""
        if not task_ids:
            return []
        stmt = select(TaskDependency).where(
            or_(
                col(TaskDependency.dependent_task_id).in_(task_ids),
                col(TaskDependency.depends_on_task_id).in_(task_ids),
            )
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, dependency: TaskDependency) -> TaskDependency:
        """Insert an edge; raises UniqueViolation if it exists"""
        self.session.add(dependency)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            raise UniqueViolation(
                "task_dependencies",
                f"{dependency.dependent_task_id} -> {dependency.depends_on_task_id}",
            ) from exc
        await self.session.refresh(dependency)
        return dependency

    async def delete(self, dependent_task_id: UUID, depends_on_task_id: UUID) -> int:
        """Delete an edge if present; returns the number of rows deleted"""
        stmt = delete(TaskDependency).where(
            col(TaskDependency.dependent_task_id) == dependent_task_id,
            col(TaskDependency.depends_on_task_id) == depends_on_task_id,
        )
        result = await self.session.execute(stmt)
        return result.rowcount
