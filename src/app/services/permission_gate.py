"""
Permission Gate

Request-time authorization: resolves the caller's membership in the project,
resolves the role's permission set, then allows or denies.
"""

import logging
from uuid import UUID

from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.services.permission_model import PermissionModel
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ErrorCode

logger = logging.getLogger(__name__)


class GateDecision(BaseModel):
    """Outcome of an allowed check"""

    user_id: str
    project_id: str
    permission: str
    role_id: int
    membership_status: str


class PermissionGate:
    """
    Coarse, permission-name based check run before every mutating call.

    By default membership status is not considered: a pending invitee is
    evaluated with the permissions of the role they were invited with.
    Set require_active_membership to deny pending members instead.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        permission_model: PermissionModel,
        require_active_membership: bool = False,
    ):
        self.uow = uow
        self.permission_model = permission_model
        self.require_active_membership = require_active_membership

    async def check(
        self, user_id: UUID, project_id: UUID, permission: str
    ) -> Result[GateDecision]:
        async with self.uow:
            membership = await self.uow.memberships.get(project_id, user_id)

            if membership is None or (
                self.require_active_membership and not membership.is_active
            ):
                logger.info(f"Deny {permission}: user {user_id} is not a member of {project_id}")
                return Return.err(
                    Error(ErrorCode.NOT_A_MEMBER, "Not a member of this project")
                )

            if not await self.permission_model.grants(membership.role_id, permission):
                logger.info(
                    f"Deny {permission}: role {membership.role_id} of user {user_id} "
                    f"in project {project_id} lacks it"
                )
                return Return.err(
                    Error(
                        ErrorCode.INSUFFICIENT_PERMISSION,
                        "Forbidden: Insufficient permissions",
                    )
                )

            logger.debug(f"Allow {permission} for user {user_id} in project {project_id}")
            return Return.ok(
                GateDecision(
                    user_id=str(user_id),
                    project_id=str(project_id),
                    permission=permission,
                    role_id=membership.role_id,
                    membership_status=membership.status.value,
                )
            )
