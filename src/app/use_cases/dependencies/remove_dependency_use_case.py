import logging
from uuid import UUID

from libs.result import Result, Return
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork

from .dtos import RemoveDependencyResponse

logger = logging.getLogger(__name__)


class RemoveDependencyUseCase:
    """
    Deletes an edge. Idempotent: removing an absent edge succeeds with
    removed=False.
    """

    def __init__(self, uow: UnitOfWork, side_effects: SideEffects):
        self.uow = uow
        self.side_effects = side_effects

    async def execute(
        self, user_id: UUID, dependent_task_id: UUID, depends_on_task_id: UUID
    ) -> Result[RemoveDependencyResponse]:
        async with self.uow:
            deleted = await self.uow.task_dependencies.delete(
                dependent_task_id, depends_on_task_id
            )
            await self.uow.commit()

            if deleted:
                logger.info(
                    f"User {user_id} removed dependency {dependent_task_id} -> {depends_on_task_id}"
                )
                await self.side_effects.log_activity(
                    user_id,
                    "remove_dependency",
                    dependent_task_id,
                    "task",
                    {"depends_on_task_id": str(depends_on_task_id)},
                )

            return Return.ok(
                RemoveDependencyResponse(
                    dependent_task_id=str(dependent_task_id),
                    depends_on_task_id=str(depends_on_task_id),
                    removed=deleted > 0,
                )
            )
