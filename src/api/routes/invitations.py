from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.memberships import (
    AcceptInvitationUseCase,
    DeclineInvitationUseCase,
    GetInvitationDetailsUseCase,
)
from src.app.use_cases.memberships.dtos import (
    InvitationDetailsResponse,
    InvitationStatusResponse,
)
from src.depends import get_current_user_id, get_side_effects, get_unit_of_work

router = APIRouter(prefix="/projects", tags=["Invitations"])


@router.get(
    "/{project_id}/invitation",
    status_code=status.HTTP_200_OK,
    response_model=InvitationDetailsResponse,
)
async def get_invitation(
    project_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Invitation Details

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: ALREADY_ACTIVE
    """
    use_case = GetInvitationDetailsUseCase(uow)
    result = await use_case.execute(project_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{project_id}/invitation/accept",
    status_code=status.HTTP_200_OK,
    response_model=InvitationStatusResponse,
)
async def accept_invitation(
    project_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    side_effects: SideEffects = Depends(get_side_effects),
):
    """
    Accept Invitation

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: ALREADY_ACTIVE
    """
    use_case = AcceptInvitationUseCase(uow, side_effects)
    result = await use_case.execute(project_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{project_id}/invitation/decline",
    status_code=status.HTTP_200_OK,
    response_model=InvitationStatusResponse,
)
async def decline_invitation(
    project_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    side_effects: SideEffects = Depends(get_side_effects),
):
    """
    Decline Invitation

    The pending membership is deleted; the user may be invited again.

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: ALREADY_ACTIVE
    """
    use_case = DeclineInvitationUseCase(uow, side_effects)
    result = await use_case.execute(project_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
