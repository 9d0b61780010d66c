"""
Dependency Graph

Per-project directed graph over tasks. An edge dependent -> depends_on
means "dependent is blocked by / related to depends_on".
"""

import logging
from typing import List, Set
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import DependencyType, Task

logger = logging.getLogger(__name__)


class DependencyGraph:
    """
    Graph queries used by the dependency use cases.

    Callers own the unit-of-work context; every method here only reads.

    include_related_in_cycle_check=True walks every edge type when looking
    for cycles, so a loop made only of related edges is rejected too.
    With False, related edges never take part in cycle detection.
    """

    def __init__(self, uow: UnitOfWork, include_related_in_cycle_check: bool = True):
        self.uow = uow
        self.include_related_in_cycle_check = include_related_in_cycle_check

    def _walks(self, dependency_type: DependencyType) -> bool:
        return self.include_related_in_cycle_check or dependency_type == DependencyType.blocks

    async def would_create_cycle(
        self,
        dependent_task_id: UUID,
        depends_on_task_id: UUID,
        dependency_type: DependencyType = DependencyType.blocks,
    ) -> bool:
        """
        True if adding dependent -> depends_on closes a cycle.

        Depth-first search from depends_on along its outgoing edges; the new
        edge closes a cycle iff dependent is reachable. O(V + E) per call.
        """
        if not self._walks(dependency_type):
            return False

        visited: Set[UUID] = set()
        stack: List[UUID] = [depends_on_task_id]

        while stack:
            current = stack.pop()

            if current == dependent_task_id:
                logger.info(
                    f"Cycle detected: {depends_on_task_id} already reaches {dependent_task_id}"
                )
                return True

            if current in visited:
                continue
            visited.add(current)

            for edge in await self.uow.task_dependencies.get_by_dependent(current):
                if self._walks(edge.dependency_type):
                    stack.append(edge.depends_on_task_id)

        logger.debug(
            f"No cycle for {dependent_task_id} -> {depends_on_task_id} "
            f"({len(visited)} task(s) visited)"
        )
        return False

    async def get_blocking_tasks(self, task_id: UUID) -> List[Task]:
        """Not-done tasks that task_id depends on through blocks edges"""
        edges = await self.uow.task_dependencies.get_by_dependent(task_id)
        blocker_ids = [
            edge.depends_on_task_id
            for edge in edges
            if edge.dependency_type == DependencyType.blocks
        ]
        blockers = await self.uow.tasks.get_by_ids(blocker_ids)
        return [task for task in blockers if not task.is_done]

    async def is_task_blocked(self, task_id: UUID) -> bool:
        return len(await self.get_blocking_tasks(task_id)) > 0
