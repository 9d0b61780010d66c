from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ErrorCode

from .dtos import TaskDependentsResponse
from .mappers import to_dependency_response


class GetTaskDependentsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, task_id: UUID) -> Result[TaskDependentsResponse]:
        async with self.uow:
            task = await self.uow.tasks.get_by_id(task_id)
            if task is None:
                return Return.err(Error(ErrorCode.TASK_NOT_FOUND, "Task not found"))

            edges = await self.uow.task_dependencies.get_by_depends_on(task_id)
            tasks = {
                t.id: t
                for t in await self.uow.tasks.get_by_ids([e.dependent_task_id for e in edges])
            }
            return Return.ok(
                TaskDependentsResponse(
                    task_id=str(task_id),
                    dependents=[
                        to_dependency_response(edge, tasks.get(edge.dependent_task_id))
                        for edge in edges
                    ],
                )
            )
