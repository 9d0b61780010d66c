from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Task


class ITaskRepository(ABC):
    """Task repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        """Get task by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, task_ids: List[UUID]) -> List[Task]:
        """Get all tasks whose ID is in task_ids"""
        pass

    @abstractmethod
    async def get_ids_by_project_id(self, project_id: UUID) -> List[UUID]:
        """IDs of every task in a project"""
        pass

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Create a new task"""
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """Update existing task"""
        pass
