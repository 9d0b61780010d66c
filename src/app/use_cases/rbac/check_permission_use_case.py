from uuid import UUID

from libs.result import Result, Return
from src.app.services.permission_gate import PermissionGate

from .dtos import PermissionCheckResponse


class CheckPermissionUseCase:
    """
    Answers "may the caller do X here?" without failing.

    A denial is a successful result with allowed=False and the denial code
    as reason.
    """

    def __init__(self, gate: PermissionGate):
        self.gate = gate

    async def execute(
        self, user_id: UUID, project_id: UUID, permission: str
    ) -> Result[PermissionCheckResponse]:
        decision = await self.gate.check(user_id, project_id, permission)

        if decision.is_err():
            return Return.ok(
                PermissionCheckResponse(
                    permission=permission, allowed=False, reason=decision.error.code
                )
            )

        return Return.ok(PermissionCheckResponse(permission=permission, allowed=True))
