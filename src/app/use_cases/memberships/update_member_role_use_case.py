"""
Update Member Role Use Case
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

from .dtos import UpdateMemberRoleResponse

logger = logging.getLogger(__name__)


class UpdateMemberRoleUseCase:
    """
    Use case for changing a member's role.

    Business Rules:
    - The owner's role is immutable and nobody can be promoted to owner
    - Actor cannot change their own role
    - Actor must be able to manage both the target's current role
      and the new role (strictly lower rank than the actor)
    - Status is left untouched (a pending invitee stays pending)
    """

    def __init__(self, uow: UnitOfWork, side_effects: SideEffects):
        self.uow = uow
        self.side_effects = side_effects

    async def execute(
        self, actor_user_id: UUID, project_id: UUID, target_user_id: UUID, new_role_id: int
    ) -> Result[UpdateMemberRoleResponse]:
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

            new_role = await self.uow.roles.get_by_id(new_role_id)
            if new_role is None:
                return Return.err(Error(ErrorCode.INVALID_ROLE, "Invalid role"))

            if target_role.name == RoleName.owner.value:
                return Return.err(
                    Error(ErrorCode.OWNER_IMMUTABLE, "The owner's role cannot be changed")
                )
            if new_role.name == RoleName.owner.value:
                return Return.err(
                    Error(ErrorCode.OWNER_IMMUTABLE, "Ownership cannot be assigned")
                )

            if actor_user_id == target_user_id:
                return Return.err(
                    Error(ErrorCode.SELF_ROLE_CHANGE, "You cannot change your own role")
                )

            if not (
                role_hierarchy.can_manage_role(actor_role.name, target_role.name)
                and role_hierarchy.can_manage_role(actor_role.name, new_role.name)
            ):
                return Return.err(
                    Error(
                        ErrorCode.INSUFFICIENT_RANK,
                        "You do not have permission to assign this role",
                    )
                )

            old_role_name = target_role.name
            new_role_name = new_role.name

            target_membership.role_id = new_role.id
            await self.uow.memberships.update(target_membership)

            await self.uow.commit()

            logger.info(
                f"User {actor_user_id} changed role of {target_user_id} in project "
                f"{project_id}: {old_role_name} -> {new_role_name}"
            )

            await self.side_effects.log_activity(
                actor_user_id,
                "update_member_role",
                project_id,
                "project",
                {
                    "target_user_id": str(target_user_id),
                    "old_role": old_role_name,
                    "new_role": new_role_name,
                },
            )
            await self.side_effects.invalidate(project_list_key(target_user_id))

            return Return.ok(
                UpdateMemberRoleResponse(
                    user_id=str(target_user_id), old_role=old_role_name, new_role=new_role_name
                )
            )
