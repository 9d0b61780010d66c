"""
Project Use Case DTOs (Data Transfer Objects)

All Response classes for the project domain.
"""

from typing import List, Optional

from pydantic import BaseModel


class ProjectResponse(BaseModel):
    """A project as seen by one of its members"""

    id: str
    name: str
    description: Optional[str] = None
    status: str
    owner_id: str
    created_at: str


class ProjectListResponse(BaseModel):
    """Projects where the caller holds an active membership"""

    projects: List[ProjectResponse]


class ProjectMemberInfo(BaseModel):
    """One row of the member list"""

    user_id: str
    name: Optional[str] = None
    email: str
    role_id: int
    role_name: str
    role_description: Optional[str] = None
    status: str
    joined_at: str
    can_be_assigned: bool


class ProjectMembersResponse(BaseModel):
    project_id: str
    members: List[ProjectMemberInfo]
