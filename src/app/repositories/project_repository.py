from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Project


class IProjectRepository(ABC):
    """Project repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, project_ids: List[UUID]) -> List[Project]:
        """Get all projects whose ID is in project_ids"""
        pass

    @abstractmethod
    async def lock(self, project_id: UUID) -> Optional[Project]:
        """
        Get project by ID and hold a row lock on it until commit/rollback.

        Serializes check-then-write sequences scoped to one project.
        """
        pass

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Create a new project"""
        pass
