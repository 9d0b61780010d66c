"""
Invite Link Use Case DTOs
"""

from typing import Optional

from pydantic import BaseModel


class InviteLinkResponse(BaseModel):
    """A freshly created invite link"""

    id: str
    project_id: str
    token: str
    url: str
    role: str
    max_uses: Optional[int] = None
    uses_count: int
    expires_at: Optional[str] = None
    created_at: str


class JoinProjectResponse(BaseModel):
    """Result of redeeming an invite link"""

    project_id: str
    project_name: str
    role: str
    status: str
