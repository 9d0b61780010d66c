"""
Collaboration Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    DependencyType,
    MembershipStatus,
    ProjectStatus,
    TaskStatus,
)

# Export all entities
from .user import User
from .project import Project
from .role import Permission, Role, RolePermission
from .project_membership import ProjectMembership
from .invite_link import InviteLink
from .task import Task
from .task_dependency import TaskDependency
from .activity_log import ActivityLog
from .notification import Notification

__all__ = [
    # Enums
    "DependencyType",
    "MembershipStatus",
    "ProjectStatus",
    "TaskStatus",
    # Entities
    "User",
    "Project",
    "Role",
    "Permission",
    "RolePermission",
    "ProjectMembership",
    "InviteLink",
    "Task",
    "TaskDependency",
    "ActivityLog",
    "Notification",
]
