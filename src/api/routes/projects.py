from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.cache_service import ICacheService
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.projects import (
    CreateProjectUseCase,
    GetProjectMembersUseCase,
    GetProjectsUseCase,
    ProjectListResponse,
    ProjectMembersResponse,
    ProjectResponse,
)
from src.depends import (
    get_cache,
    get_current_user_id,
    get_side_effects,
    get_unit_of_work,
    require_permission,
)
from src.domain.permissions import Perm

router = APIRouter(prefix="/projects", tags=["Projects"])


class CreateProjectRequest(BaseModel):
    """Create project HTTP request payload"""

    name: str = Field(..., min_length=1, max_length=255, description="Project name")
    description: Optional[str] = Field(None, description="Optional description")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectResponse)
async def create_project(
    request: CreateProjectRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    side_effects: SideEffects = Depends(get_side_effects),
):
    """
    Create Project

    The caller becomes the owner with an active membership.

    Raises:
        - 400 Bad Request: INVALID_INPUT
        - 401 Unauthorized: Invalid or expired JWT
    """
    use_case = CreateProjectUseCase(uow, side_effects)
    result = await use_case.execute(user_id, request.name, request.description)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=ProjectListResponse)
async def list_projects(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: ICacheService = Depends(get_cache),
):
    """Projects in which the caller holds an active membership"""
    use_case = GetProjectsUseCase(uow, cache, ApplicationConfig.CACHE_TTL_SECONDS)
    result = await use_case.execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{project_id}/members",
    status_code=status.HTTP_200_OK,
    response_model=ProjectMembersResponse,
    dependencies=[Depends(require_permission(Perm.MEMBER_VIEW))],
)
async def list_project_members(
    project_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Project Members

    Active members and pending invitees with their roles.

    Raises:
        - 403 Forbidden: NOT_A_MEMBER or INSUFFICIENT_PERMISSION
    """
    use_case = GetProjectMembersUseCase(uow)
    result = await use_case.execute(project_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
