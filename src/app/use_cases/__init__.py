"""
Use Cases

Organized by workflow:
- projects/: Project creation and listing
- memberships/: Direct invitations and member management
- invite_links/: Reusable invite links
- rbac/: Role / permission catalog and permission checks
- tasks/: Minimal task nodes
- dependencies/: Task dependency graph

Import from subdirectories for better organization.
"""

from .dependencies import (
    AddDependencyUseCase,
    GetProjectDependenciesUseCase,
    GetTaskDependenciesUseCase,
    GetTaskDependentsUseCase,
    RemoveDependencyUseCase,
)
from .invite_links import CreateInviteLinkUseCase, JoinViaInviteLinkUseCase
from .memberships import (
    AcceptInvitationUseCase,
    DeclineInvitationUseCase,
    GetInvitableRolesUseCase,
    GetInvitationDetailsUseCase,
    InviteMemberUseCase,
    RemoveMemberUseCase,
    UpdateMemberRoleUseCase,
)
from .projects import CreateProjectUseCase, GetProjectMembersUseCase, GetProjectsUseCase
from .rbac import CheckPermissionUseCase, ListPermissionsUseCase, ListRolesUseCase, SeedRolesUseCase
from .tasks import CreateTaskUseCase, UpdateTaskStatusUseCase

__all__ = [
    # Projects
    "CreateProjectUseCase",
    "GetProjectsUseCase",
    "GetProjectMembersUseCase",
    # Memberships
    "InviteMemberUseCase",
    "AcceptInvitationUseCase",
    "DeclineInvitationUseCase",
    "RemoveMemberUseCase",
    "UpdateMemberRoleUseCase",
    "GetInvitationDetailsUseCase",
    "GetInvitableRolesUseCase",
    # Invite links
    "CreateInviteLinkUseCase",
    "JoinViaInviteLinkUseCase",
    # RBAC
    "SeedRolesUseCase",
    "ListRolesUseCase",
    "ListPermissionsUseCase",
    "CheckPermissionUseCase",
    # Tasks
    "CreateTaskUseCase",
    "UpdateTaskStatusUseCase",
    # Dependencies
    "AddDependencyUseCase",
    "RemoveDependencyUseCase",
    "GetTaskDependenciesUseCase",
    "GetTaskDependentsUseCase",
    "GetProjectDependenciesUseCase",
]
