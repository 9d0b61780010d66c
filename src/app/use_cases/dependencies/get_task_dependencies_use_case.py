from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.dependency_graph import DependencyGraph
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ErrorCode

from .dtos import TaskDependenciesResponse
from .mappers import to_dependency_response, to_task_summary


class GetTaskDependenciesUseCase:
    """What a task depends on, and which of those still block it"""

    def __init__(self, uow: UnitOfWork, graph: DependencyGraph):
        self.uow = uow
        self.graph = graph

    async def execute(self, task_id: UUID) -> Result[TaskDependenciesResponse]:
        async with self.uow:
            task = await self.uow.tasks.get_by_id(task_id)
            if task is None:
                return Return.err(Error(ErrorCode.TASK_NOT_FOUND, "Task not found"))

            edges = await self.uow.task_dependencies.get_by_dependent(task_id)
            tasks = {
                t.id: t
                for t in await self.uow.tasks.get_by_ids([e.depends_on_task_id for e in edges])
            }
            blocking = await self.graph.get_blocking_tasks(task_id)

            return Return.ok(
                TaskDependenciesResponse(
                    task_id=str(task_id),
                    dependencies=[
                        to_dependency_response(edge, tasks.get(edge.depends_on_task_id))
                        for edge in edges
                    ],
                    is_blocked=len(blocking) > 0,
                    blocking_tasks=[to_task_summary(t) for t in blocking],
                )
            )
