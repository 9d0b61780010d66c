from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.dependency_graph import DependencyGraph
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks import CreateTaskUseCase, UpdateTaskStatusUseCase
from src.app.use_cases.tasks.dtos import TaskResponse
from src.depends import (
    get_current_user_id,
    get_dependency_graph,
    get_side_effects,
    get_unit_of_work,
    require_permission,
    require_task_permission,
)
from src.domain.permissions import Perm

router = APIRouter(tags=["Tasks"])


class CreateTaskRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    assignee_id: Optional[UUID] = Field(None, description="Active, assignable member")


class UpdateTaskStatusRequest(BaseModel):
    status: str = Field(..., description="todo, in-progress or done")


@router.post(
    "/projects/{project_id}/tasks",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskResponse,
    dependencies=[Depends(require_permission(Perm.TASK_CREATE))],
)
async def create_task(
    project_id: UUID,
    request: CreateTaskRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    side_effects: SideEffects = Depends(get_side_effects),
):
    """
    Create Task

    Raises:
        - 400 Bad Request: INVALID_INPUT (empty title, unassignable assignee)
        - 403 Forbidden: NOT_A_MEMBER, INSUFFICIENT_PERMISSION
    """
    use_case = CreateTaskUseCase(uow, side_effects)
    result = await use_case.execute(user_id, project_id, request.title, request.assignee_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/tasks/{task_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=TaskResponse,
    dependencies=[Depends(require_task_permission(Perm.TASK_EDIT_OWN))],
)
async def update_task_status(
    task_id: UUID,
    request: UpdateTaskStatusRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    side_effects: SideEffects = Depends(get_side_effects),
    graph: DependencyGraph = Depends(get_dependency_graph),
):
    """
    Change Task Status

    Blocked tasks may still move; is_blocked in the response reports open
    blockers.
    """
    use_case = UpdateTaskStatusUseCase(uow, side_effects, graph)
    result = await use_case.execute(user_id, task_id, request.status)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
