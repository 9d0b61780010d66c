"""
Static role/permission catalog.

Seeded into the roles, permissions and role_permissions tables by
SeedRolesUseCase. Permission names are namespaced "resource:action[:scope]".
"""

from typing import Dict, FrozenSet

from .role_hierarchy import RoleName


class Perm:
    """Permission name constants"""

    PROJECT_DELETE = "project:delete"
    PROJECT_EDIT = "project:edit"
    PROJECT_VIEW = "project:view"

    MEMBER_INVITE = "member:invite"
    MEMBER_REMOVE = "member:remove"
    MEMBER_ROLE_EDIT = "member:role:edit"
    MEMBER_VIEW = "member:view"

    TASK_CREATE = "task:create"
    TASK_EDIT_ANY = "task:edit:any"
    TASK_EDIT_OWN = "task:edit:own"
    TASK_DELETE_ANY = "task:delete:any"
    TASK_DELETE_OWN = "task:delete:own"
    TASK_ASSIGN = "task:assign"
    TASK_VIEW = "task:view"
    TASK_BE_ASSIGNED = "task:be_assigned"

    COMMENT_CREATE = "comment:create"
    COMMENT_EDIT_OWN = "comment:edit:own"
    COMMENT_DELETE_OWN = "comment:delete:own"
    COMMENT_VIEW = "comment:view"


ROLE_DESCRIPTIONS: Dict[RoleName, str] = {
    RoleName.owner: "Full control over project including deletion and member management",
    RoleName.admin: "Can manage project settings and members (except owner)",
    RoleName.project_manager: "Can assign tasks and manage project workflows",
    RoleName.member: "Can create and manage own tasks",
    RoleName.contributor: "Can edit existing tasks but not create new ones",
    RoleName.viewer: "Read-only access to project (cannot be assigned tasks)",
    RoleName.guest: "Temporary read-only access with expiration",
}

PERMISSION_DESCRIPTIONS: Dict[str, str] = {
    Perm.PROJECT_DELETE: "Delete project",
    Perm.PROJECT_EDIT: "Edit project settings",
    Perm.PROJECT_VIEW: "View project",
    Perm.MEMBER_INVITE: "Invite members to project",
    Perm.MEMBER_REMOVE: "Remove members from project",
    Perm.MEMBER_ROLE_EDIT: "Change member roles",
    Perm.MEMBER_VIEW: "View project members",
    Perm.TASK_CREATE: "Create new tasks",
    Perm.TASK_EDIT_ANY: "Edit any task",
    Perm.TASK_EDIT_OWN: "Edit own tasks",
    Perm.TASK_DELETE_ANY: "Delete any task",
    Perm.TASK_DELETE_OWN: "Delete own tasks",
    Perm.TASK_ASSIGN: "Assign tasks to members",
    Perm.TASK_VIEW: "View tasks",
    Perm.TASK_BE_ASSIGNED: "Can be assigned to tasks",
    Perm.COMMENT_CREATE: "Create comments",
    Perm.COMMENT_EDIT_OWN: "Edit own comments",
    Perm.COMMENT_DELETE_OWN: "Delete own comments",
    Perm.COMMENT_VIEW: "View comments",
}

_COMMENT_AUTHOR = (
    Perm.COMMENT_CREATE,
    Perm.COMMENT_EDIT_OWN,
    Perm.COMMENT_DELETE_OWN,
    Perm.COMMENT_VIEW,
)
_MEMBER_MANAGEMENT = (
    Perm.MEMBER_INVITE,
    Perm.MEMBER_REMOVE,
    Perm.MEMBER_ROLE_EDIT,
    Perm.MEMBER_VIEW,
)
_TASK_MANAGEMENT = (
    Perm.TASK_CREATE,
    Perm.TASK_EDIT_ANY,
    Perm.TASK_EDIT_OWN,
    Perm.TASK_DELETE_ANY,
    Perm.TASK_DELETE_OWN,
    Perm.TASK_ASSIGN,
    Perm.TASK_VIEW,
    Perm.TASK_BE_ASSIGNED,
)
_READ_ONLY = (Perm.PROJECT_VIEW, Perm.MEMBER_VIEW, Perm.TASK_VIEW, Perm.COMMENT_VIEW)

ROLE_PERMISSIONS: Dict[RoleName, FrozenSet[str]] = {
    RoleName.owner: frozenset(
        (Perm.PROJECT_DELETE, Perm.PROJECT_EDIT, Perm.PROJECT_VIEW)
        + _MEMBER_MANAGEMENT
        + _TASK_MANAGEMENT
        + _COMMENT_AUTHOR
    ),
    RoleName.admin: frozenset(
        (Perm.PROJECT_EDIT, Perm.PROJECT_VIEW)
        + _MEMBER_MANAGEMENT
        + _TASK_MANAGEMENT
        + _COMMENT_AUTHOR
    ),
    RoleName.project_manager: frozenset(
        (Perm.PROJECT_VIEW,) + _MEMBER_MANAGEMENT + _TASK_MANAGEMENT + _COMMENT_AUTHOR
    ),
    RoleName.member: frozenset(
        (
            Perm.PROJECT_VIEW,
            Perm.MEMBER_INVITE,
            Perm.MEMBER_VIEW,
            Perm.TASK_CREATE,
            Perm.TASK_EDIT_OWN,
            Perm.TASK_DELETE_OWN,
            Perm.TASK_VIEW,
            Perm.TASK_BE_ASSIGNED,
        )
        + _COMMENT_AUTHOR
    ),
    RoleName.contributor: frozenset(
        (
            Perm.PROJECT_VIEW,
            Perm.MEMBER_VIEW,
            Perm.TASK_EDIT_OWN,
            Perm.TASK_VIEW,
            Perm.TASK_BE_ASSIGNED,
        )
        + _COMMENT_AUTHOR
    ),
    RoleName.viewer: frozenset(_READ_ONLY),
    RoleName.guest: frozenset(_READ_ONLY),
}


