from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.dependency_graph import DependencyGraph
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dependencies import (
    AddDependencyUseCase,
    GetProjectDependenciesUseCase,
    GetTaskDependenciesUseCase,
    GetTaskDependentsUseCase,
    RemoveDependencyUseCase,
)
from src.app.use_cases.dependencies.dtos import (
    DependencyResponse,
    ProjectDependenciesResponse,
    RemoveDependencyResponse,
    TaskDependenciesResponse,
    TaskDependentsResponse,
)
from src.depends import (
    get_current_user_id,
    get_dependency_graph,
    get_side_effects,
    get_unit_of_work,
    require_permission,
    require_task_permission,
)
from src.domain.entities import DependencyType
from src.domain.permissions import Perm

router = APIRouter(tags=["Dependencies"])


class AddDependencyRequest(BaseModel):
    """The path task will depend on depends_on_task_id"""

    depends_on_task_id: UUID = Field(..., description="Task that must be done first")
    dependency_type: str = Field(DependencyType.blocks.value, description="blocks or related")


@router.post(
    "/tasks/{task_id}/dependencies",
    status_code=status.HTTP_201_CREATED,
    response_model=DependencyResponse,
    dependencies=[Depends(require_task_permission(Perm.TASK_EDIT_OWN))],
)
async def add_dependency(
    task_id: UUID,
    request: AddDependencyRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    side_effects: SideEffects = Depends(get_side_effects),
    graph: DependencyGraph = Depends(get_dependency_graph),
):
    """
    Add Task Dependency

    Raises:
        - 400 Bad Request: SELF_DEPENDENCY, CROSS_PROJECT_DEPENDENCY,
                           CYCLIC_DEPENDENCY, INVALID_INPUT
        - 404 Not Found: TASK_NOT_FOUND
        - 409 Conflict: DUPLICATE_DEPENDENCY
    """
    use_case = AddDependencyUseCase(uow, side_effects, graph)
    result = await use_case.execute(
        user_id, task_id, request.depends_on_task_id, request.dependency_type
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/tasks/{task_id}/dependencies/{depends_on_task_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveDependencyResponse,
    dependencies=[Depends(require_task_permission(Perm.TASK_EDIT_OWN))],
)
async def remove_dependency(
    task_id: UUID,
    depends_on_task_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    side_effects: SideEffects = Depends(get_side_effects),
):
    """Remove Task Dependency (idempotent)"""
    use_case = RemoveDependencyUseCase(uow, side_effects)
    result = await use_case.execute(user_id, task_id, depends_on_task_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/tasks/{task_id}/dependencies",
    status_code=status.HTTP_200_OK,
    response_model=TaskDependenciesResponse,
    dependencies=[Depends(require_task_permission(Perm.TASK_VIEW))],
)
async def get_task_dependencies(
    task_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    graph: DependencyGraph = Depends(get_dependency_graph),
):
    result = await GetTaskDependenciesUseCase(uow, graph).execute(task_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/tasks/{task_id}/dependents",
    status_code=status.HTTP_200_OK,
    response_model=TaskDependentsResponse,
    dependencies=[Depends(require_task_permission(Perm.TASK_VIEW))],
)
async def get_task_dependents(
    task_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTaskDependentsUseCase(uow).execute(task_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/projects/{project_id}/dependencies",
    status_code=status.HTTP_200_OK,
    response_model=ProjectDependenciesResponse,
    dependencies=[Depends(require_permission(Perm.TASK_VIEW))],
)
async def get_project_dependencies(
    project_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Every edge in the project's dependency graph"""
    result = await GetProjectDependenciesUseCase(uow).execute(project_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
