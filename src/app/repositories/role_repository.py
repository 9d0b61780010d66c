from abc import ABC, abstractmethod
from typing import List, Optional, Set

from src.domain.entities import Permission, Role


class IRoleRepository(ABC):
    """Role / permission catalog repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, role_id: int) -> Optional[Role]:
        """Get role by ID"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Role]:
        """Get role by name"""
        pass

    @abstractmethod
    async def get_all(self) -> List[Role]:
        """Get every role"""
        pass

    @abstractmethod
    async def create(self, role: Role) -> Role:
        """Create a new role"""
        pass

    @abstractmethod
    async def get_permission_names(self, role_id: int) -> Set[str]:
        """Permission names granted to a role, via role_permissions"""
        pass

    @abstractmethod
    async def get_permission_by_name(self, name: str) -> Optional[Permission]:
        """Get permission by name"""
        pass

    @abstractmethod
    async def get_all_permissions(self) -> List[Permission]:
        """Get every permission"""
        pass

    @abstractmethod
    async def create_permission(self, permission: Permission) -> Permission:
        """Create a new permission"""
        pass

    @abstractmethod
    async def grant(self, role_id: int, permission_id: int) -> bool:
        """Link a permission to a role; False if the link already existed"""
        pass
