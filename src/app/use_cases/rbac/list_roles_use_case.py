from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.role_hierarchy import role_hierarchy

from .dtos import RoleResponse


class ListRolesUseCase:
    """Every known role with its rank and permission names, most privileged first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[list[RoleResponse]]:
        async with self.uow:
            roles = [
                role for role in await self.uow.roles.get_all() if role_hierarchy.is_known(role.name)
            ]

            response = []
            for role in roles:
                permissions = await self.uow.roles.get_permission_names(role.id)
                response.append(
                    RoleResponse(
                        id=role.id,
                        name=role.name,
                        description=role.description,
                        rank=role_hierarchy.rank(role.name),
                        permissions=sorted(permissions),
                    )
                )

            response.sort(key=lambda r: r.rank, reverse=True)
            return Return.ok(response)
