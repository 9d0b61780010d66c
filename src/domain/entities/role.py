"""
Role, Permission and RolePermission Entities

The RBAC catalog. Seeded once (see SeedRolesUseCase) and read-only after.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class Role(SQLModel, table=True):
    """
    Role entity - a named privilege tier within a project.

    The rank of a role is derived from its name by RoleHierarchy,
    never stored.
    """

    __tablename__ = "roles"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=50)
    description: Optional[str] = Field(default=None)


class Permission(SQLModel, table=True):
    """Permission entity - namespaced capability, e.g. task:edit:own"""

    __tablename__ = "permissions"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=100)
    description: Optional[str] = Field(default=None)


class RolePermission(SQLModel, table=True):
    """Many-to-many join between roles and permissions"""

    __tablename__ = "role_permissions"

    role_id: int = Field(foreign_key="roles.id", primary_key=True)
    permission_id: int = Field(foreign_key="permissions.id", primary_key=True)
