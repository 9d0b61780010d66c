from typing import List, Optional

from pydantic import BaseModel


class RoleResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    rank: int
    permissions: List[str]


class PermissionResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None


class SeedRolesResponse(BaseModel):
    roles_created: int
    permissions_created: int
    grants_created: int


class PermissionCheckResponse(BaseModel):
    """Non-throwing variant of the permission gate, for UI affordances"""

    permission: str
    allowed: bool
    reason: Optional[str] = None
