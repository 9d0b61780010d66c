from .check_permission_use_case import CheckPermissionUseCase
from .list_permissions_use_case import ListPermissionsUseCase
from .list_roles_use_case import ListRolesUseCase
from .seed_roles_use_case import SeedRolesUseCase

__all__ = [
    "CheckPermissionUseCase",
    "ListPermissionsUseCase",
    "ListRolesUseCase",
    "SeedRolesUseCase",
]
