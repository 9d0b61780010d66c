"""
Join Via Invite Link Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.cache_service import project_list_key
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import MembershipStatus, ProjectMembership
from src.domain.errors import ErrorCode, UniqueViolation

from .dtos import JoinProjectResponse

logger = logging.getLogger(__name__)


class JoinViaInviteLinkUseCase:
    """
    Use case for redeeming an invite link.

    Business Rules:
    - Token must exist, be unexpired and below max_uses
    - Caller must not already hold a membership (pending or active)
    - The membership is created active, skipping the accept step
    - Membership insert and uses_count increment commit together;
      the increment is conditional, so max_uses is never exceeded
    """

    def __init__(self, uow: UnitOfWork, side_effects: SideEffects):
        self.uow = uow
        self.side_effects = side_effects

    async def execute(self, token: str, user_id: UUID) -> Result[JoinProjectResponse]:
        async with self.uow:
            link = await self.uow.invite_links.get_by_token(token)
            if link is None:
                return Return.err(
                    Error(ErrorCode.INVITE_LINK_INVALID, "Invalid or unknown invite link")
                )

            now = utcnow()
            if link.is_expired(now):
                return Return.err(
                    Error(ErrorCode.INVITE_LINK_EXPIRED, "This invite link has expired")
                )
            if link.is_exhausted():
                return Return.err(
                    Error(
                        ErrorCode.INVITE_LINK_EXHAUSTED,
                        "This invite link has reached its maximum uses",
                    )
                )

            link_id = link.id
            project_id = link.project_id

            existing = await self.uow.memberships.get(project_id, user_id)
            if existing is not None:
                return Return.err(
                    Error(ErrorCode.ALREADY_MEMBER, "You are already a member of this project")
                )

            project = await self.uow.projects.get_by_id(project_id)
            role = await self.uow.roles.get_by_id(link.role_id)
            project_name = project.name
            role_name = role.name

            try:
                await self.uow.memberships.create(
                    ProjectMembership(
                        project_id=project_id,
                        user_id=user_id,
                        role_id=role.id,
                        status=MembershipStatus.active,
                    )
                )
            except UniqueViolation:
                await self.uow.rollback()
                return Return.err(
                    Error(ErrorCode.ALREADY_MEMBER, "You are already a member of this project")
                )

            if not await self.uow.invite_links.consume(link_id, now):
                # Lost the race for the last slot (or the link just expired)
                await self.uow.rollback()
                return Return.err(
                    Error(
                        ErrorCode.INVITE_LINK_EXHAUSTED,
                        "This invite link has reached its maximum uses",
                    )
                )

            await self.uow.commit()

            logger.info(f"User {user_id} joined project {project_id} via invite link {link_id}")

            await self.side_effects.log_activity(
                user_id,
                "join_via_invite_link",
                project_id,
                "project",
                {"invite_link_id": str(link_id), "role": role_name},
            )
            await self.side_effects.invalidate(project_list_key(user_id))

            return Return.ok(
                JoinProjectResponse(
                    project_id=str(project_id),
                    project_name=project_name,
                    role=role_name,
                    status=MembershipStatus.active.value,
                )
            )
