"""
Remove Member Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.cache_service import project_list_key
from src.app.services.membership_lookup import load_member_role
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ErrorCode
from src.domain.role_hierarchy import RoleName, role_hierarchy

from .dtos import RemoveMemberResponse

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Use case for removing a member (or cancelling a pending invitation).

    Business Rules:
    - Actor cannot remove themselves
    - Owner cannot be removed
    - Actor's role must rank strictly above the target's role
    - The membership row is deleted
    """

    def __init__(self, uow: UnitOfWork, side_effects: SideEffects):
        self.uow = uow
        self.side_effects = side_effects

    async def execute(
        self, actor_user_id: UUID, project_id: UUID, target_user_id: UUID
    ) -> Result[RemoveMemberResponse]:
        if actor_user_id == target_user_id:
            return Return.err(
                Error(ErrorCode.SELF_REMOVAL, "You cannot remove yourself from the project")
            )

        async with self.uow:
            actor_membership, actor_role = await load_member_role(
                self.uow, project_id, actor_user_id
            )
            if actor_membership is None:
                return Return.err(
                    Error(ErrorCode.NOT_A_MEMBER, "You are not a member of this project")
                )

            target_membership, target_role = await load_member_role(
                self.uow, project_id, target_user_id
            )
            if target_membership is None:
                return Return.err(Error(ErrorCode.MEMBER_NOT_FOUND, "Member not found"))

            if target_role.name == RoleName.owner.value:
                return Return.err(
                    Error(ErrorCode.CANNOT_REMOVE_OWNER, "The project owner cannot be removed")
                )

            if not role_hierarchy.has_higher_role(actor_role.name, target_role.name):
                return Return.err(
                    Error(
                        ErrorCode.INSUFFICIENT_RANK,
                        "You cannot remove a member with an equal or higher role",
                    )
                )

            removed_role = target_role.name
            await self.uow.memberships.delete(target_membership)

            await self.uow.commit()

            logger.info(
                f"User {actor_user_id} removed {target_user_id} ({removed_role}) "
                f"from project {project_id}"
            )

            await self.side_effects.log_activity(
                actor_user_id,
                "remove_member",
                project_id,
                "project",
                {"target_user_id": str(target_user_id), "role": removed_role},
            )
            await self.side_effects.invalidate(project_list_key(target_user_id))

            return Return.ok(RemoveMemberResponse(status="removed", user_id=str(target_user_id)))
