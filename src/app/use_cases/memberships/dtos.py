"""
Membership Use Case DTOs (Data Transfer Objects)

All Response classes for the membership lifecycle.
"""

from typing import List, Optional

from pydantic import BaseModel


class InviteMemberResponse(BaseModel):
    """Response for direct (email-targeted) invitation"""

    project_id: str
    user_id: str
    email: str
    role: str
    status: str


class InvitationStatusResponse(BaseModel):
    """Response for accept / decline"""

    project_id: str
    status: str


class RemoveMemberResponse(BaseModel):
    status: str
    user_id: str


class UpdateMemberRoleResponse(BaseModel):
    user_id: str
    old_role: str
    new_role: str


class ProjectSummary(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    status: str


class InviterInfo(BaseModel):
    id: str
    name: Optional[str] = None
    email: str


class RoleInfo(BaseModel):
    id: int
    name: str
    description: Optional[str] = None


class InvitationDetailsResponse(BaseModel):
    """What a pending invitee sees before accepting or declining"""

    project: ProjectSummary
    inviter: InviterInfo
    role: RoleInfo
    invitation_status: str
    invited_at: str


class InvitableRolesResponse(BaseModel):
    """Roles the caller may invite or assign, most privileged first"""

    current_role: str
    roles: List[RoleInfo]
