"""
Seed Roles Use Case

Loads the static role/permission catalog into the database.
"""

import logging

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Permission, Role
from src.domain.permissions import PERMISSION_DESCRIPTIONS, ROLE_DESCRIPTIONS, ROLE_PERMISSIONS

from .dtos import SeedRolesResponse

logger = logging.getLogger(__name__)


class SeedRolesUseCase:
    """
    Idempotent catalog seed.

    Business Rules:
    - Creates missing roles, permissions and role/permission links
    - Never deletes or renames anything already present
    - Running it twice creates nothing the second time
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[SeedRolesResponse]:
        roles_created = permissions_created = grants_created = 0

        async with self.uow:
            permission_ids = {}
            for name, description in PERMISSION_DESCRIPTIONS.items():
                permission = await self.uow.roles.get_permission_by_name(name)
                if permission is None:
                    permission = await self.uow.roles.create_permission(
                        Permission(name=name, description=description)
                    )
                    permissions_created += 1
                permission_ids[name] = permission.id

            for role_name, permission_names in ROLE_PERMISSIONS.items():
                role = await self.uow.roles.get_by_name(role_name.value)
                if role is None:
                    role = await self.uow.roles.create(
                        Role(name=role_name.value, description=ROLE_DESCRIPTIONS[role_name])
                    )
                    roles_created += 1

                for permission_name in sorted(permission_names):
                    if await self.uow.roles.grant(role.id, permission_ids[permission_name]):
                        grants_created += 1

            await self.uow.commit()

        logger.info(
            f"Seeded catalog: {roles_created} role(s), {permissions_created} permission(s), "
            f"{grants_created} grant(s) created"
        )

        return Return.ok(
            SeedRolesResponse(
                roles_created=roles_created,
                permissions_created=permissions_created,
                grants_created=grants_created,
            )
        )
