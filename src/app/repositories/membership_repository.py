from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import ProjectMembership


class IProjectMembershipRepository(ABC):
    """
    Project membership repository interface - application layer

    The authoritative (project, user) -> (role, status) table.
    """

    @abstractmethod
    async def get(self, project_id: UUID, user_id: UUID) -> Optional[ProjectMembership]:
        """Get membership by project and user"""
        pass

    @abstractmethod
    async def get_by_project_id(self, project_id: UUID) -> List[ProjectMembership]:
        """Get all memberships of a project"""
        pass

    @abstractmethod
    async def get_active_by_user_id(self, user_id: UUID) -> List[ProjectMembership]:
        """Get all active memberships of a user"""
        pass

    @abstractmethod
    async def create(self, membership: ProjectMembership) -> ProjectMembership:
        """Insert a membership; raises UniqueViolation if one exists"""
        pass

    @abstractmethod
    async def update(self, membership: ProjectMembership) -> ProjectMembership:
        """Persist status / role changes"""
        pass

    @abstractmethod
    async def delete(self, membership: ProjectMembership) -> None:
        """Delete a membership row"""
        pass
