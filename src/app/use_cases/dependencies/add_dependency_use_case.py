"""
Add Dependency Use Case

Adds an edge to the per-project task dependency graph.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.dependency_graph import DependencyGraph
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import DependencyType, TaskDependency
from src.domain.errors import ErrorCode, UniqueViolation

from .dtos import DependencyResponse
from .mappers import to_dependency_response

logger = logging.getLogger(__name__)


class AddDependencyUseCase:
    """
    Use case for declaring that one task depends on another.

    Business Rules (checked in this order):
    - A task cannot depend on itself
    - Both tasks must exist
    - Both tasks must belong to the same project
    - The edge must not exist yet (in either type)
    - The edge must not close a cycle

    Cycle check and insert run under the project row lock, so two
    concurrent inserts cannot together form a cycle.
    """

    def __init__(self, uow: UnitOfWork, side_effects: SideEffects, graph: DependencyGraph):
        self.uow = uow
        self.side_effects = side_effects
        self.graph = graph

    async def execute(
        self,
        user_id: UUID,
        dependent_task_id: UUID,
        depends_on_task_id: UUID,
        dependency_type: str = DependencyType.blocks.value,
    ) -> Result[DependencyResponse]:
        try:
            edge_type = DependencyType(dependency_type)
        except ValueError:
            return Return.err(
                Error(ErrorCode.INVALID_INPUT, f"Invalid dependency type: {dependency_type}")
            )

        if dependent_task_id == depends_on_task_id:
            return Return.err(
                Error(ErrorCode.SELF_DEPENDENCY, "A task cannot depend on itself")
            )

        async with self.uow:
            dependent = await self.uow.tasks.get_by_id(dependent_task_id)
            depends_on = await self.uow.tasks.get_by_id(depends_on_task_id)
            if dependent is None or depends_on is None:
                return Return.err(Error(ErrorCode.TASK_NOT_FOUND, "Task not found"))

            if dependent.project_id != depends_on.project_id:
                return Return.err(
                    Error(
                        ErrorCode.CROSS_PROJECT_DEPENDENCY,
                        "Tasks must belong to the same project",
                    )
                )

            project_id = dependent.project_id
            await self.uow.projects.lock(project_id)

            existing = await self.uow.task_dependencies.get(dependent_task_id, depends_on_task_id)
            if existing is not None:
                return Return.err(
                    Error(ErrorCode.DUPLICATE_DEPENDENCY, "Dependency already exists")
                )

            if await self.graph.would_create_cycle(
                dependent_task_id, depends_on_task_id, edge_type
            ):
                return Return.err(
                    Error(
                        ErrorCode.CYCLIC_DEPENDENCY,
                        "Cannot add dependency: would create a circular dependency",
                    )
                )

            try:
                edge = await self.uow.task_dependencies.create(
                    TaskDependency(
                        dependent_task_id=dependent_task_id,
                        depends_on_task_id=depends_on_task_id,
                        dependency_type=edge_type,
                    )
                )
            except UniqueViolation:
                await self.uow.rollback()
                return Return.err(
                    Error(ErrorCode.DUPLICATE_DEPENDENCY, "Dependency already exists")
                )

            await self.uow.commit()

            response = to_dependency_response(edge)

            logger.info(
                f"User {user_id} added {edge_type.value} dependency "
                f"{dependent_task_id} -> {depends_on_task_id}"
            )

            await self.side_effects.log_activity(
                user_id,
                "add_dependency",
                dependent_task_id,
                "task",
                {
                    "depends_on_task_id": str(depends_on_task_id),
                    "dependency_type": edge_type.value,
                    "project_id": str(project_id),
                },
            )

            return Return.ok(response)
