from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.membership_lookup import load_member_role
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ErrorCode
from src.domain.role_hierarchy import role_hierarchy

from .dtos import InvitableRolesResponse, RoleInfo


class GetInvitableRolesUseCase:
    """Roles the caller may invite or assign in a project, most privileged first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_id: UUID, user_id: UUID) -> Result[InvitableRolesResponse]:
        async with self.uow:
            membership, role = await load_member_role(self.uow, project_id, user_id)
            if membership is None or not membership.is_active:
                return Return.err(
                    Error(ErrorCode.NOT_A_MEMBER, "You are not a member of this project")
                )

            roles = []
            for name in role_hierarchy.invitable_roles(role.name):
                invitable = await self.uow.roles.get_by_name(name.value)
                if invitable is not None:
                    roles.append(
                        RoleInfo(
                            id=invitable.id,
                            name=invitable.name,
                            description=invitable.description,
                        )
                    )

            return Return.ok(InvitableRolesResponse(current_role=role.name, roles=roles))
