"""
Invite Member Use Case

Direct, email-targeted invitation to a project.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.cache_service import project_list_key
from src.app.services.email_templates import project_invite_template
from src.app.services.membership_lookup import load_member_role
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import MembershipStatus, ProjectMembership, User
from src.domain.errors import ErrorCode, UniqueViolation
from src.domain.role_hierarchy import role_hierarchy

from .dtos import InviteMemberResponse

logger = logging.getLogger(__name__)


class InviteMemberUseCase:
    """
    Use case for inviting a user to a project by email.

    Business Rules:
    - Inviter must hold an active membership
    - Inviter may only invite roles strictly below their own rank,
      so nobody can invite a second owner
    - Unknown emails get a placeholder user (name from the local part);
      if a concurrent request creates it first, that user is reused
    - A user already holding a membership row (pending or active) is rejected
    - The new membership is pending until the invitee accepts
    - Email, in-app notification and activity log are best-effort
    """

    def __init__(self, uow: UnitOfWork, side_effects: SideEffects, app_url: str = ""):
        self.uow = uow
        self.side_effects = side_effects
        self.app_url = app_url.rstrip("/")

    async def execute(
        self, inviter_user_id: UUID, project_id: UUID, email: str, role_id: int
    ) -> Result[InviteMemberResponse]:
        """
        Execute invite member use case.

        Args:
            inviter_user_id: User sending the invitation
            project_id: Target project
            email: Invitee email address
            role_id: Role to grant on acceptance

        Returns:
            Result with InviteMemberResponse DTO, or Error
        """
        email = email.strip().lower()

        async with self.uow:
            invitee = await self._get_or_create_invitee(email)

            # Serializes concurrent invitations into the same project
            project = await self.uow.projects.lock(project_id)
            if project is None:
                return Return.err(Error(ErrorCode.PROJECT_NOT_FOUND, "Project not found"))

            inviter_membership, inviter_role = await load_member_role(
                self.uow, project_id, inviter_user_id
            )
            if inviter_membership is None or not inviter_membership.is_active:
                return Return.err(
                    Error(ErrorCode.NOT_A_MEMBER, "You are not a member of this project")
                )

            target_role = await self.uow.roles.get_by_id(role_id)
            if target_role is None:
                return Return.err(Error(ErrorCode.INVALID_ROLE, "Invalid role"))

            if not role_hierarchy.can_manage_role(inviter_role.name, target_role.name):
                logger.info(
                    f"User {inviter_user_id} ({inviter_role.name}) may not invite "
                    f"as {target_role.name} in project {project_id}"
                )
                return Return.err(
                    Error(
                        ErrorCode.INSUFFICIENT_RANK,
                        f"You do not have permission to invite members as '{target_role.name}'",
                    )
                )

            existing = await self.uow.memberships.get(project_id, invitee.id)
            if existing is not None:
                return Return.err(
                    Error(ErrorCode.ALREADY_MEMBER, "User is already a member of this project")
                )

            try:
                await self.uow.memberships.create(
                    ProjectMembership(
                        project_id=project_id,
                        user_id=invitee.id,
                        role_id=target_role.id,
                        status=MembershipStatus.pending,
                    )
                )
            except UniqueViolation:
                await self.uow.rollback()
                return Return.err(
                    Error(ErrorCode.ALREADY_MEMBER, "User is already a member of this project")
                )

            inviter = await self.uow.users.get_by_id(inviter_user_id)

            await self.uow.commit()

            invitee_id = invitee.id
            project_name = project.name
            role_name = target_role.name
            inviter_name = inviter.display_name if inviter else "A teammate"

            logger.info(
                f"User {inviter_user_id} invited {email} to project {project_id} as {role_name}"
            )

            response = InviteMemberResponse(
                project_id=str(project_id),
                user_id=str(invitee_id),
                email=email,
                role=role_name,
                status=MembershipStatus.pending.value,
            )

            invitation_path = f"/invitations/{project_id}"
            await self.side_effects.send_email(
                email,
                f"You've been invited to join {project_name}",
                project_invite_template(
                    inviter_name, project_name, role_name, f"{self.app_url}{invitation_path}"
                ),
            )
            await self.side_effects.notify(
                invitee_id,
                "invite",
                f"Invited to {project_name}",
                f"{inviter_name} invited you to join {project_name} as {role_name}",
                invitation_path,
                "project",
                project_id,
            )
            await self.side_effects.log_activity(
                inviter_user_id,
                "invite_member",
                project_id,
                "project",
                {"target_user_id": str(invitee_id), "email": email, "role": role_name},
            )
            await self.side_effects.invalidate(project_list_key(invitee_id))

            return Return.ok(response)

    async def _get_or_create_invitee(self, email: str) -> User:
        invitee = await self.uow.users.get_by_email(email)
        if invitee is not None:
            return invitee
        try:
            return await self.uow.users.create(User(email=email, name=email.split("@")[0]))
        except UniqueViolation:
            # Runs before any other write in this unit of work
            await self.uow.rollback()
            logger.info(f"Placeholder user for {email} was created concurrently, reusing it")
            return await self.uow.users.get_by_email(email)
