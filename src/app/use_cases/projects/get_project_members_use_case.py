"""
Get Project Members Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ErrorCode
from src.domain.role_hierarchy import role_hierarchy

from .dtos import ProjectMemberInfo, ProjectMembersResponse


class GetProjectMembersUseCase:
    """Every membership of a project, pending invitees included"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_id: UUID) -> Result[ProjectMembersResponse]:
        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error(ErrorCode.PROJECT_NOT_FOUND, "Project not found"))

            memberships = await self.uow.memberships.get_by_project_id(project_id)
            users = {
                user.id: user
                for user in await self.uow.users.get_by_ids(
                    [membership.user_id for membership in memberships]
                )
            }
            roles = {role.id: role for role in await self.uow.roles.get_all()}

            members = []
            for membership in memberships:
                user = users.get(membership.user_id)
                role = roles.get(membership.role_id)
                if user is None or role is None:
                    continue
                members.append(
                    ProjectMemberInfo(
                        user_id=str(user.id),
                        name=user.name,
                        email=user.email,
                        role_id=role.id,
                        role_name=role.name,
                        role_description=role.description,
                        status=membership.status.value,
                        joined_at=membership.joined_at.isoformat(),
                        can_be_assigned=role_hierarchy.can_be_assigned_to_tasks(role.name),
                    )
                )

            return Return.ok(
                ProjectMembersResponse(project_id=str(project_id), members=members)
            )
