from typing import List, Optional, Set

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.role_repository import IRoleRepository
from src.domain.entities import Permission, Role, RolePermission


class RoleRepository(IRoleRepository):
    """Role / permission catalog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, role_id: int) -> Optional[Role]:
        """Get role by ID"""
        stmt = select(Role).where(Role.id == role_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name(self, name: str) -> Optional[Role]:
        """Get role by name"""
        stmt = select(Role).where(Role.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_all(self) -> List[Role]:
        """Get every role"""
        result = await self.session.exec(select(Role).order_by(col(Role.id)))
        return list(result.all())

    async def create(self, role: Role) -> Role:
        """Create a new role"""
        self.session.add(role)
        await self.session.flush()
        await self.session.refresh(role)
        return role

    async def get_permission_names(self, role_id: int) -> Set[str]:
        """Permission names granted to a role, via role_permissions"""
        stmt = (
            select(Permission.name)
            .join(RolePermission, RolePermission.permission_id == Permission.id)
            .where(RolePermission.role_id == role_id)
        )
        result = await self.session.exec(stmt)
        return set(result.all())

    async def get_permission_by_name(self, name: str) -> Optional[Permission]:
        """Get permission by name"""
        stmt = select(Permission).where(Permission.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_all_permissions(self) -> List[Permission]:
        """Get every permission"""
        result = await self.session.exec(select(Permission).order_by(col(Permission.id)))
        return list(result.all())

    async def create_permission(self, permission: Permission) -> Permission:
        """Create a new permission"""
        self.session.add(permission)
        await self.session.flush()
        await self.session.refresh(permission)
        return permission

    async def grant(self, role_id: int, permission_id: int) -> bool:
        """Link a permission to a role; False if the link already existed"""
        existing = await self.session.get(RolePermission, (role_id, permission_id))
        if existing is not None:
            return False
        self.session.add(RolePermission(role_id=role_id, permission_id=permission_id))
        await self.session.flush()
        return True
