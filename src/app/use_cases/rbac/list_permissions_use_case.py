from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import PermissionResponse


class ListPermissionsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[list[PermissionResponse]]:
        async with self.uow:
            permissions = await self.uow.roles.get_all_permissions()
            return Return.ok(
                [
                    PermissionResponse(id=p.id, name=p.name, description=p.description)
                    for p in permissions
                ]
            )
