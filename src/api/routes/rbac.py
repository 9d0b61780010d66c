from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.app.services.permission_gate import PermissionGate
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.rbac import CheckPermissionUseCase, ListPermissionsUseCase, ListRolesUseCase
from src.app.use_cases.rbac.dtos import PermissionCheckResponse, PermissionResponse, RoleResponse
from src.depends import get_current_user_id, get_permission_gate, get_unit_of_work

router = APIRouter(tags=["RBAC"])


@router.get(
    "/rbac/roles",
    status_code=status.HTTP_200_OK,
    response_model=List[RoleResponse],
    dependencies=[Depends(get_current_user_id)],
)
async def list_roles(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Role catalog, most privileged first, with each role's permission names"""
    result = await ListRolesUseCase(uow).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/rbac/permissions",
    status_code=status.HTTP_200_OK,
    response_model=List[PermissionResponse],
    dependencies=[Depends(get_current_user_id)],
)
async def list_permissions(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListPermissionsUseCase(uow).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/projects/{project_id}/permissions/check",
    status_code=status.HTTP_200_OK,
    response_model=PermissionCheckResponse,
)
async def check_permission(
    project_id: UUID,
    permission: str = Query(..., description="Permission name, e.g. task:create"),
    user_id: UUID = Depends(get_current_user_id),
    gate: PermissionGate = Depends(get_permission_gate),
):
    """
    Permission Check

    Never fails on denial: returns allowed=false with the reason code, so
    clients can hide actions the caller cannot perform.
    """
    result = await CheckPermissionUseCase(gate).execute(user_id, project_id, permission)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
