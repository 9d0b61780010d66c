"""
Create Task Use Case

Tasks exist here only as nodes of the dependency graph, so the model is
deliberately thin: title, status and an optional assignee.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.membership_lookup import load_member_role
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Task
from src.domain.errors import ErrorCode
from src.domain.role_hierarchy import role_hierarchy

from .dtos import TaskResponse

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """
    Business Rules:
    - Title is required
    - An assignee must be an active member whose role can be assigned
      tasks (viewers and guests cannot)
    """

    def __init__(self, uow: UnitOfWork, side_effects: SideEffects):
        self.uow = uow
        self.side_effects = side_effects

    async def execute(
        self,
        user_id: UUID,
        project_id: UUID,
        title: str,
        assignee_id: Optional[UUID] = None,
    ) -> Result[TaskResponse]:
        title = (title or "").strip()
        if not title:
            return Return.err(Error(ErrorCode.INVALID_INPUT, "Task title is required"))

        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error(ErrorCode.PROJECT_NOT_FOUND, "Project not found"))

            if assignee_id is not None:
                membership, role = await load_member_role(self.uow, project_id, assignee_id)
                if membership is None or not membership.is_active:
                    return Return.err(
                        Error(ErrorCode.INVALID_INPUT, "Assignee is not a member of this project")
                    )
                if not role_hierarchy.can_be_assigned_to_tasks(role.name):
                    return Return.err(
                        Error(
                            ErrorCode.INVALID_INPUT,
                            f"Members with role '{role.name}' cannot be assigned tasks",
                        )
                    )

            task = await self.uow.tasks.create(
                Task(
                    project_id=project_id,
                    title=title,
                    creator_id=user_id,
                    assignee_id=assignee_id,
                )
            )

            await self.uow.commit()

            response = TaskResponse(
                id=str(task.id),
                project_id=str(project_id),
                title=task.title,
                status=task.status.value,
                creator_id=str(user_id),
                assignee_id=str(assignee_id) if assignee_id else None,
                created_at=task.created_at.isoformat(),
            )
            task_id = task.id

            logger.info(f"User {user_id} created task {task_id} in project {project_id}")

            await self.side_effects.log_activity(
                user_id, "create_task", task_id, "task", {"title": title}
            )

            return Return.ok(response)
