"""
Create Invite Link Use Case
"""

import logging
import secrets
from datetime import timedelta
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.membership_lookup import load_member_role
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import InviteLink
from src.domain.errors import ErrorCode
from src.domain.role_hierarchy import role_hierarchy

from .dtos import InviteLinkResponse

logger = logging.getLogger(__name__)


class CreateInviteLinkUseCase:
    """
    Use case for creating a reusable invite link.

    Business Rules:
    - Creator must hold an active membership
    - The granted role must rank strictly below the creator's role
    - max_uses, when given, must be >= 1 (absent means unlimited)
    - expires_in_days, when given, must be >= 1 (absent means never expires)
    - Token is url-safe and drawn from a CSPRNG
    """

    def __init__(
        self,
        uow: UnitOfWork,
        side_effects: SideEffects,
        app_url: str = "",
        token_bytes: int = 24,
    ):
        self.uow = uow
        self.side_effects = side_effects
        self.app_url = app_url.rstrip("/")
        self.token_bytes = token_bytes

    async def execute(
        self,
        creator_user_id: UUID,
        project_id: UUID,
        role_id: int,
        max_uses: Optional[int] = None,
        expires_in_days: Optional[int] = None,
    ) -> Result[InviteLinkResponse]:
        if max_uses is not None and max_uses < 1:
            return Return.err(Error(ErrorCode.INVALID_INPUT, "max_uses must be at least 1"))
        if expires_in_days is not None and expires_in_days < 1:
            return Return.err(
                Error(ErrorCode.INVALID_INPUT, "expires_in_days must be at least 1")
            )

        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error(ErrorCode.PROJECT_NOT_FOUND, "Project not found"))

            membership, creator_role = await load_member_role(
                self.uow, project_id, creator_user_id
            )
            if membership is None or not membership.is_active:
                return Return.err(
                    Error(ErrorCode.NOT_A_MEMBER, "You are not a member of this project")
                )

            role = await self.uow.roles.get_by_id(role_id)
            if role is None:
                return Return.err(Error(ErrorCode.INVALID_ROLE, "Invalid role"))

            if not role_hierarchy.can_manage_role(creator_role.name, role.name):
                return Return.err(
                    Error(
                        ErrorCode.INSUFFICIENT_RANK,
                        f"You do not have permission to invite members as '{role.name}'",
                    )
                )

            expires_at = None
            if expires_in_days is not None:
                expires_at = utcnow() + timedelta(days=expires_in_days)

            link = await self.uow.invite_links.create(
                InviteLink(
                    project_id=project_id,
                    created_by=creator_user_id,
                    token=secrets.token_urlsafe(self.token_bytes),
                    role_id=role.id,
                    max_uses=max_uses,
                    expires_at=expires_at,
                )
            )

            await self.uow.commit()

            response = InviteLinkResponse(
                id=str(link.id),
                project_id=str(project_id),
                token=link.token,
                url=f"{self.app_url}/join/{link.token}",
                role=role.name,
                max_uses=link.max_uses,
                uses_count=link.uses_count,
                expires_at=link.expires_at.isoformat() if link.expires_at else None,
                created_at=link.created_at.isoformat(),
            )

            logger.info(
                f"User {creator_user_id} created invite link {response.id} "
                f"for project {project_id} ({role.name})"
            )

            await self.side_effects.log_activity(
                creator_user_id,
                "create_invite_link",
                project_id,
                "project",
                {"invite_link_id": response.id, "role": response.role, "max_uses": max_uses},
            )

            return Return.ok(response)
