"""
Accept Invitation Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.cache_service import project_list_key
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import MembershipStatus
from src.domain.errors import ErrorCode

from .dtos import InvitationStatusResponse

logger = logging.getLogger(__name__)


class AcceptInvitationUseCase:
    """
    Use case for accepting a pending direct invitation.

    Business Rules:
    - A membership row must exist for (project, user)
    - Already active memberships are rejected
    - pending -> active
    """

    def __init__(self, uow: UnitOfWork, side_effects: SideEffects):
        self.uow = uow
        self.side_effects = side_effects

    async def execute(self, project_id: UUID, user_id: UUID) -> Result[InvitationStatusResponse]:
        async with self.uow:
            membership = await self.uow.memberships.get(project_id, user_id)

            if membership is None:
                return Return.err(
                    Error(ErrorCode.INVITATION_NOT_FOUND, "Invitation not found")
                )

            if membership.status == MembershipStatus.active:
                return Return.err(
                    Error(ErrorCode.ALREADY_ACTIVE, "You are already an active member")
                )

            if membership.status == MembershipStatus.declined:
                return Return.err(
                    Error(ErrorCode.INVITATION_DECLINED, "You have declined this invitation")
                )

            membership.status = MembershipStatus.active
            await self.uow.memberships.update(membership)

            await self.uow.commit()

            logger.info(f"User {user_id} accepted invitation to project {project_id}")

            await self.side_effects.log_activity(
                user_id, "accept_invitation", project_id, "project"
            )
            await self.side_effects.invalidate(project_list_key(user_id))

            return Return.ok(
                InvitationStatusResponse(
                    project_id=str(project_id), status=MembershipStatus.active.value
                )
            )
