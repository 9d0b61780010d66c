from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import TaskDependency


class ITaskDependencyRepository(ABC):
    """Task dependency edge repository interface - application layer"""

    @abstractmethod
    async def get(
        self, dependent_task_id: UUID, depends_on_task_id: UUID
    ) -> Optional[TaskDependency]:
        """Get a single edge"""
        pass

    @abstractmethod
    async def get_by_dependent(self, task_id: UUID) -> List[TaskDependency]:
        """Outgoing edges: what task_id depends on"""
        pass

    @abstractmethod
    async def get_by_depends_on(self, task_id: UUID) -> List[TaskDependency]:
        """Incoming edges: what depends on task_id"""
        pass

    @abstractmethod
    async def get_touching(self, task_ids: List[UUID]) -> List[TaskDependency]:
        """Edges with either endpoint in task_ids"""
        pass

    @abstractmethod
    async def create(self, dependency: TaskDependency) -> TaskDependency:
        """Insert an edge; raises UniqueViolation if it exists"""
        pass

    @abstractmethod
    async def delete(self, dependent_task_id: UUID, depends_on_task_id: UUID) -> int:
        """Delete an edge if present; returns the number of rows deleted"""
        pass
