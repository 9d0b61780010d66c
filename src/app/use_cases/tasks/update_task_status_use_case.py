import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.dependency_graph import DependencyGraph
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TaskStatus
from src.domain.errors import ErrorCode

from .dtos import TaskResponse

logger = logging.getLogger(__name__)


class UpdateTaskStatusUseCase:
    """
    Moves a task between todo / in-progress / done.

    Being blocked is advisory: the transition is never refused, the
    response only reports whether the task still has open blockers.
    """

    def __init__(self, uow: UnitOfWork, side_effects: SideEffects, graph: DependencyGraph):
        self.uow = uow
        self.side_effects = side_effects
        self.graph = graph

    async def execute(self, user_id: UUID, task_id: UUID, status: str) -> Result[TaskResponse]:
        try:
            new_status = TaskStatus(status)
        except ValueError:
            return Return.err(Error(ErrorCode.INVALID_INPUT, f"Invalid task status: {status}"))

        async with self.uow:
            task = await self.uow.tasks.get_by_id(task_id)
            if task is None:
                return Return.err(Error(ErrorCode.TASK_NOT_FOUND, "Task not found"))

            old_status = task.status.value
            task.status = new_status
            await self.uow.tasks.update(task)

            await self.uow.commit()

            is_blocked = await self.graph.is_task_blocked(task_id)

            response = TaskResponse(
                id=str(task.id),
                project_id=str(task.project_id),
                title=task.title,
                status=task.status.value,
                creator_id=str(task.creator_id),
                assignee_id=str(task.assignee_id) if task.assignee_id else None,
                created_at=task.created_at.isoformat(),
                is_blocked=is_blocked,
            )

            logger.info(f"Task {task_id} status {old_status} -> {new_status.value}")

            await self.side_effects.log_activity(
                user_id,
                "update_task_status",
                task_id,
                "task",
                {"old_status": old_status, "new_status": new_status.value},
            )

            return Return.ok(response)
