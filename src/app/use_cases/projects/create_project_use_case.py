"""
Create Project Use Case

Creates a project together with its owner membership.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.cache_service import project_list_key
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import MembershipStatus, Project, ProjectMembership
from src.domain.errors import ErrorCode
from src.domain.role_hierarchy import RoleName

from .dtos import ProjectResponse

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    """
    Use case for creating a project.

    Business Rules:
    - The creator becomes the owner: membership {role: owner, status: active}
    - Project and owner membership are committed together, with no
      invitation step
    - Logs create_project and invalidates the creator's project list
    """

    def __init__(self, uow: UnitOfWork, side_effects: SideEffects):
        self.uow = uow
        self.side_effects = side_effects

    async def execute(
        self, user_id: UUID, name: str, description: Optional[str] = None
    ) -> Result[ProjectResponse]:
        """
        Execute create project use case.

        Args:
            user_id: Creator, becomes the project owner
            name: Project name
            description: Optional description

        Returns:
            Result with ProjectResponse DTO, or Error
        """
        name = (name or "").strip()
        if not name:
            return Return.err(Error(ErrorCode.INVALID_INPUT, "Project name is required"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.UNAUTHORIZED, "Unknown user"))

            owner_role = await self.uow.roles.get_by_name(RoleName.owner.value)
            if owner_role is None:
                return Return.err(
                    Error(ErrorCode.ROLES_NOT_SEEDED, "Role catalog has not been seeded")
                )

            project = await self.uow.projects.create(
                Project(name=name, description=description, owner_id=user_id)
            )

            await self.uow.memberships.create(
                ProjectMembership(
                    project_id=project.id,
                    user_id=user_id,
                    role_id=owner_role.id,
                    status=MembershipStatus.active,
                )
            )

            await self.uow.commit()

            response = ProjectResponse(
                id=str(project.id),
                name=project.name,
                description=project.description,
                status=project.status.value,
                owner_id=str(project.owner_id),
                created_at=project.created_at.isoformat(),
            )
            project_id = project.id

            logger.info(f"User {user_id} created project {project_id}")

            await self.side_effects.log_activity(
                user_id, "create_project", project_id, "project", {"name": name}
            )
            await self.side_effects.invalidate(project_list_key(user_id))

            return Return.ok(response)
