from typing import Dict, Set

from src.app.services.unit_of_work import UnitOfWork


class PermissionModel:
    """
    role -> set of permission names, read from the role_permissions join.

    The catalog is static once seeded, so lookups are memoized for the
    lifetime of this instance (one request).
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self._cache: Dict[int, Set[str]] = {}

    async def permissions_of(self, role_id: int) -> Set[str]:
        if role_id not in self._cache:
            self._cache[role_id] = await self.uow.roles.get_permission_names(role_id)
        return self._cache[role_id]

    async def grants(self, role_id: int, permission: str) -> bool:
        return permission in await self.permissions_of(role_id)
