"""
Role Hierarchy

Fixed total order over project roles:
owner > admin > project_manager > member > contributor > viewer > guest.

An actor may invite, assign and change only roles strictly below its own
rank, and may remove only members strictly below its own rank.
"""

from enum import Enum
from typing import List, Union


class UnknownRoleError(ValueError):
    """Raised by RoleHierarchy.rank() for a name outside the fixed role set"""

    def __init__(self, role_name: str):
        self.role_name = role_name
        super().__init__(f"Unknown role: {role_name}")


class RoleName(str, Enum):
    """Project role names, declared from least to most privileged"""

    guest = "guest"
    viewer = "viewer"
    contributor = "contributor"
    member = "member"
    project_manager = "project_manager"
    admin = "admin"
    owner = "owner"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


_RANKS = {role: index for index, role in enumerate(RoleName)}

# Viewers and guests are read-only and never show up as task assignees
_NON_ASSIGNABLE = frozenset({RoleName.viewer, RoleName.guest})

RoleLike = Union[RoleName, str]


class RoleHierarchy:
    """
    Pure predicates over role names.

    Both predicates accept RoleName members or raw strings. A name outside
    the fixed set makes every predicate false: unknown roles can neither
    manage nor be managed.
    """

    @staticmethod
    def parse(role: RoleLike) -> RoleName:
        if isinstance(role, RoleName):
            return role
        try:
            return RoleName(role)
        except ValueError:
            raise UnknownRoleError(str(role)) from None

    @classmethod
    def rank(cls, role: RoleLike) -> int:
        """Integer rank, strictly increasing with privilege (owner highest)"""
        return cls.parse(role).rank

    @classmethod
    def is_known(cls, role: RoleLike) -> bool:
        try:
            cls.parse(role)
        except UnknownRoleError:
            return False
        return True

    @classmethod
    def can_manage_role(cls, actor_role: RoleLike, target_role: RoleLike) -> bool:
        """True iff actor may invite/assign target_role: rank(actor) > rank(target)"""
        if not (cls.is_known(actor_role) and cls.is_known(target_role)):
            return False
        return cls.rank(actor_role) > cls.rank(target_role)

    @classmethod
    def has_higher_role(cls, actor_role: RoleLike, target_role: RoleLike) -> bool:
        """True iff actor strictly outranks target; gates member removal"""
        if not (cls.is_known(actor_role) and cls.is_known(target_role)):
            return False
        return cls.rank(actor_role) > cls.rank(target_role)

    @classmethod
    def invitable_roles(cls, actor_role: RoleLike) -> List[RoleName]:
        """Roles the actor may invite or assign, most privileged first"""
        if not cls.is_known(actor_role):
            return []
        return [
            role
            for role in reversed(list(RoleName))
            if cls.can_manage_role(actor_role, role)
        ]

    @classmethod
    def can_be_assigned_to_tasks(cls, role: RoleLike) -> bool:
        if not cls.is_known(role):
            return False
        return cls.parse(role) not in _NON_ASSIGNABLE


role_hierarchy = RoleHierarchy()
