"""
Get Invitation Details Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ErrorCode

from .dtos import InvitationDetailsResponse, InviterInfo, ProjectSummary, RoleInfo


class GetInvitationDetailsUseCase:
    """
    Shows a pending invitee what they were invited to.

    The inviter is taken from the most recent invite_member activity that
    targets this user; when no such entry survives, the project owner is shown.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_id: UUID, user_id: UUID) -> Result[InvitationDetailsResponse]:
        async with self.uow:
            membership = await self.uow.memberships.get(project_id, user_id)
            if membership is None:
                return Return.err(
                    Error(ErrorCode.INVITATION_NOT_FOUND, "Invitation not found")
                )

            if membership.is_active:
                return Return.err(
                    Error(ErrorCode.ALREADY_ACTIVE, "You are already an active member")
                )

            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error(ErrorCode.PROJECT_NOT_FOUND, "Project not found"))

            role = await self.uow.roles.get_by_id(membership.role_id)

            activity = await self.uow.activity_logs.get_latest(
                project_id, "invite_member", target_user_id=user_id
            )
            inviter_id = activity.user_id if activity else project.owner_id
            inviter = await self.uow.users.get_by_id(inviter_id)
            if inviter is None:
                inviter = await self.uow.users.get_by_id(project.owner_id)

            return Return.ok(
                InvitationDetailsResponse(
                    project=ProjectSummary(
                        id=str(project.id),
                        name=project.name,
                        description=project.description,
                        status=project.status.value,
                    ),
                    inviter=InviterInfo(
                        id=str(inviter.id), name=inviter.name, email=inviter.email
                    ),
                    role=RoleInfo(id=role.id, name=role.name, description=role.description),
                    invitation_status=membership.status.value,
                    invited_at=membership.joined_at.isoformat(),
                )
            )
