from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invite_links import CreateInviteLinkUseCase, JoinViaInviteLinkUseCase
from src.app.use_cases.invite_links.dtos import InviteLinkResponse, JoinProjectResponse
from src.app.use_cases.memberships import (
    GetInvitableRolesUseCase,
    InviteMemberUseCase,
    RemoveMemberUseCase,
    UpdateMemberRoleUseCase,
)
from src.app.use_cases.memberships.dtos import (
    InvitableRolesResponse,
    InviteMemberResponse,
    RemoveMemberResponse,
    UpdateMemberRoleResponse,
)
from src.depends import get_current_user_id, get_side_effects, get_unit_of_work, require_permission
from src.domain.permissions import Perm

router = APIRouter(prefix="/projects", tags=["Members"])


class InviteMemberRequest(BaseModel):
    """
    Invite member HTTP request payload

    Validates incoming request for inviting a user to a project.
    """

    email: EmailStr = Field(..., description="Email address to invite")
    role_id: int = Field(..., description="Role to grant on acceptance")


class UpdateMemberRoleRequest(BaseModel):
    role_id: int = Field(..., description="New role")


class CreateInviteLinkRequest(BaseModel):
    """
    Create invite link HTTP request payload

    Omit max_uses for an unlimited link and expires_in_days for one that
    never expires.
    """

    role_id: int = Field(..., description="Role granted to everyone joining via the link")
    max_uses: Optional[int] = Field(None, description="Maximum number of joins")
    expires_in_days: Optional[int] = Field(None, description="Lifetime in days")


@router.post(
    "/join/{token}",
    status_code=status.HTTP_200_OK,
    response_model=JoinProjectResponse,
)
async def join_via_invite_link(
    token: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    side_effects: SideEffects = Depends(get_side_effects),
):
    """
    Join Project via Invite Link

    The membership is created active, with no accept step.

    Raises:
        - 404 Not Found: INVITE_LINK_INVALID
        - 409 Conflict: ALREADY_MEMBER
        - 410 Gone: INVITE_LINK_EXPIRED, INVITE_LINK_EXHAUSTED
    """
    use_case = JoinViaInviteLinkUseCase(uow, side_effects)
    result = await use_case.execute(token, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{project_id}/invitable-roles",
    status_code=status.HTTP_200_OK,
    response_model=InvitableRolesResponse,
)
async def get_invitable_roles(
    project_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Roles the caller may invite or assign, most privileged first"""
    use_case = GetInvitableRolesUseCase(uow)
    result = await use_case.execute(project_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{project_id}/members/invite",
    status_code=status.HTTP_201_CREATED,
    response_model=InviteMemberResponse,
    dependencies=[Depends(require_permission(Perm.MEMBER_INVITE))],
)
async def invite_member(
    project_id: UUID,
    request: InviteMemberRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    side_effects: SideEffects = Depends(get_side_effects),
):
    """
    Invite Member to Project

    Creates a pending membership for the invitee, creating a placeholder
    user when the email is unknown.

    Raises:
        - 400 Bad Request: INVALID_ROLE
        - 403 Forbidden: NOT_A_MEMBER, INSUFFICIENT_PERMISSION, INSUFFICIENT_RANK
        - 404 Not Found: PROJECT_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER
    """
    use_case = InviteMemberUseCase(uow, side_effects, ApplicationConfig.APP_URL)
    result = await use_case.execute(user_id, project_id, request.email, request.role_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{project_id}/members/{member_user_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveMemberResponse,
    dependencies=[Depends(require_permission(Perm.MEMBER_REMOVE))],
)
async def remove_member(
    project_id: UUID,
    member_user_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    side_effects: SideEffects = Depends(get_side_effects),
):
    """
    Remove Member

    Also cancels a pending invitation.

    Raises:
        - 400 Bad Request: SELF_REMOVAL
        - 403 Forbidden: CANNOT_REMOVE_OWNER, INSUFFICIENT_RANK
        - 404 Not Found: MEMBER_NOT_FOUND
    """
    use_case = RemoveMemberUseCase(uow, side_effects)
    result = await use_case.execute(user_id, project_id, member_user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{project_id}/members/{member_user_id}/role",
    status_code=status.HTTP_200_OK,
    response_model=UpdateMemberRoleResponse,
)
async def update_member_role(
    project_id: UUID,
    member_user_id: UUID,
    request: UpdateMemberRoleRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    side_effects: SideEffects = Depends(get_side_effects),
):
    """
    Change Member Role

    Not gated by member:role:edit. The caller must outrank both the
    member's current role and the new one.

    Raises:
        - 400 Bad Request: INVALID_ROLE, SELF_ROLE_CHANGE
        - 403 Forbidden: NOT_A_MEMBER, OWNER_IMMUTABLE, INSUFFICIENT_RANK
        - 404 Not Found: MEMBER_NOT_FOUND
    """
    use_case = UpdateMemberRoleUseCase(uow, side_effects)
    result = await use_case.execute(user_id, project_id, member_user_id, request.role_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{project_id}/invite-links",
    status_code=status.HTTP_201_CREATED,
    response_model=InviteLinkResponse,
    dependencies=[Depends(require_permission(Perm.MEMBER_INVITE))],
)
async def create_invite_link(
    project_id: UUID,
    request: CreateInviteLinkRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    side_effects: SideEffects = Depends(get_side_effects),
):
    """
    Create Invite Link

    Raises:
        - 400 Bad Request: INVALID_ROLE, INVALID_INPUT
        - 403 Forbidden: INSUFFICIENT_RANK
    """
    use_case = CreateInviteLinkUseCase(
        uow,
        side_effects,
        app_url=ApplicationConfig.APP_URL,
        token_bytes=ApplicationConfig.INVITE_LINK_TOKEN_BYTES,
    )
    result = await use_case.execute(
        user_id, project_id, request.role_id, request.max_uses, request.expires_in_days
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
