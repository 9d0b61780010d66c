from functools import lru_cache
from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.cache import InMemoryCacheService, RedisCacheService
from src.adapter.services.email_sender import LoggingEmailSender, SmtpEmailSender
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import raise_for_error
from src.api.utils.jwt import verify_jwt
from src.app.services.cache_service import ICacheService
from src.app.services.dependency_graph import DependencyGraph
from src.app.services.email_sender import IEmailSender
from src.app.services.permission_gate import GateDecision, PermissionGate
from src.app.services.permission_model import PermissionModel
from src.app.services.side_effects import SideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ErrorCode

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache
def get_cache() -> ICacheService:
    if ApplicationConfig.CACHE_BACKEND == "redis":
        return RedisCacheService(ApplicationConfig.REDIS_URL, ApplicationConfig.CACHE_TTL_SECONDS)
    return InMemoryCacheService(ApplicationConfig.CACHE_TTL_SECONDS)


@lru_cache
def get_email_sender() -> IEmailSender:
    if ApplicationConfig.EMAIL_BACKEND == "smtp":
        return SmtpEmailSender(
            host=ApplicationConfig.SMTP_HOST,
            port=ApplicationConfig.SMTP_PORT,
            sender=ApplicationConfig.EMAIL_SENDER,
            username=ApplicationConfig.SMTP_USERNAME,
            password=ApplicationConfig.SMTP_PASSWORD,
            use_tls=ApplicationConfig.SMTP_USE_TLS,
        )
    return LoggingEmailSender()


def get_side_effects(
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
    cache: ICacheService = Depends(get_cache),
) -> SideEffects:
    return SideEffects(uow, email_sender, cache)


def get_permission_gate(uow: UnitOfWork = Depends(get_unit_of_work)) -> PermissionGate:
    return PermissionGate(
        uow,
        PermissionModel(uow),
        require_active_membership=ApplicationConfig.GATE_REQUIRE_ACTIVE_MEMBERSHIP,
    )


def get_dependency_graph(uow: UnitOfWork = Depends(get_unit_of_work)) -> DependencyGraph:
    return DependencyGraph(
        uow, include_related_in_cycle_check=ApplicationConfig.CYCLE_CHECK_INCLUDE_RELATED
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id

    Raises:
        ClientError: 401 if the token is missing, invalid or expired
    """
    payload = verify_jwt(credentials.credentials) if credentials else None

    if payload is None or "user_id" not in payload:
        raise_for_error(Error(ErrorCode.UNAUTHORIZED, "Invalid or expired token"))

    return payload


async def get_current_user_id(current_user: dict = Depends(get_current_user)) -> UUID:
    try:
        return UUID(current_user["user_id"])
    except ValueError:
        raise_for_error(Error(ErrorCode.UNAUTHORIZED, "Invalid or expired token"))


def require_permission(permission: str):
    """
    Route dependency: the caller must hold `permission` in the project named
    by the {project_id} path parameter.
    """

    async def check(
        project_id: UUID,
        user_id: UUID = Depends(get_current_user_id),
        gate: PermissionGate = Depends(get_permission_gate),
    ) -> GateDecision:
        result = await gate.check(user_id, project_id, permission)
        if result.is_err():
            raise_for_error(result.error)
        return result.value

    return check


def require_task_permission(permission: str):
    """
    Route dependency for task-scoped routes: resolves {task_id} to its
    project, then checks `permission` there.
    """

    async def check(
        task_id: UUID,
        user_id: UUID = Depends(get_current_user_id),
        uow: UnitOfWork = Depends(get_unit_of_work),
        gate: PermissionGate = Depends(get_permission_gate),
    ) -> GateDecision:
        async with uow:
            task = await uow.tasks.get_by_id(task_id)
            project_id = task.project_id if task else None

        if project_id is None:
            raise_for_error(Error(ErrorCode.TASK_NOT_FOUND, "Task not found"))

        result = await gate.check(user_id, project_id, permission)
        if result.is_err():
            raise_for_error(result.error)
        return result.value

    return check
