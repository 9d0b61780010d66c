"""
Project Use Cases

Project creation and read views.
"""

from .create_project_use_case import CreateProjectUseCase
from .dtos import (
    ProjectListResponse,
    ProjectMemberInfo,
    ProjectMembersResponse,
    ProjectResponse,
)
from .get_project_members_use_case import GetProjectMembersUseCase
from .get_projects_use_case import GetProjectsUseCase

__all__ = [
    "CreateProjectUseCase",
    "GetProjectsUseCase",
    "GetProjectMembersUseCase",
    "ProjectResponse",
    "ProjectListResponse",
    "ProjectMemberInfo",
    "ProjectMembersResponse",
]
