from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ErrorCode

from .dtos import ProjectDependenciesResponse
from .mappers import to_dependency_response


class GetProjectDependenciesUseCase:
    """Every edge of a project's graph, for rendering"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_id: UUID) -> Result[ProjectDependenciesResponse]:
        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error(ErrorCode.PROJECT_NOT_FOUND, "Project not found"))

            task_ids = await self.uow.tasks.get_ids_by_project_id(project_id)
            edges = await self.uow.task_dependencies.get_touching(task_ids) if task_ids else []

            return Return.ok(
                ProjectDependenciesResponse(
                    project_id=str(project_id),
                    dependencies=[to_dependency_response(edge) for edge in edges],
                )
            )
