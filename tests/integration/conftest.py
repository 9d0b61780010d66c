from typing import List, Tuple
from uuid import UUID

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.cache import InMemoryCacheService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import generate_jwt
from src.app.services.email_sender import IEmailSender
from src.app.use_cases.rbac import SeedRolesUseCase
from src.depends import get_cache, get_email_sender, get_unit_of_work
from src.domain.entities import Role, User

API = ApplicationConfig.API_PREFIX


class RecordingEmailSender(IEmailSender):
    def __init__(self):
        self.sent: List[Tuple[str, str, str]] = []

    async def send(self, to: str, subject: str, html: str) -> None:
        self.sent.append((to, subject, html))


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        result = await SeedRolesUseCase(SqlAlchemyUnitOfWork(session)).execute()
        assert result.is_ok()
        yield session


@pytest_asyncio.fixture
async def role_ids(db_session) -> dict:
    """role name -> role id, as seeded"""
    result = await db_session.exec(select(Role.name, Role.id))
    return {name: role_id for name, role_id in result.all()}


@pytest_asyncio.fixture
def email_sender():
    return RecordingEmailSender()


@pytest_asyncio.fixture
def cache():
    return InMemoryCacheService()


@pytest_asyncio.fixture
async def client(db_session, email_sender, cache):
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_email_sender] = lambda: email_sender
    app.dependency_overrides[get_cache] = lambda: cache

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
def make_user(db_session):
    """Create a user; returns (user_id, auth headers)"""

    async def _make_user(email: str, name: str = None) -> Tuple[UUID, dict]:
        user = User(email=email, name=name or email.split("@")[0])
        db_session.add(user)
        await db_session.commit()
        user_id = user.id
        return user_id, {"Authorization": f"Bearer {generate_jwt(user_id)}"}

    return _make_user


@pytest_asyncio.fixture
def make_project(client):
    """Create a project through the API; returns its id"""

    async def _make_project(headers: dict, name: str = "Apollo") -> str:
        response = await client.post(f"{API}/projects", json={"name": name}, headers=headers)
        assert response.status_code == 201
        return response.json()["id"]

    return _make_project


@pytest_asyncio.fixture
def add_member(client, make_user, role_ids):
    """Invite a fresh user with `role` and accept; returns (user_id, headers)"""

    async def _add_member(project_id: str, owner_headers: dict, email: str, role: str):
        user_id, headers = await make_user(email)
        invite = await client.post(
            f"{API}/projects/{project_id}/members/invite",
            json={"email": email, "role_id": role_ids[role]},
            headers=owner_headers,
        )
        assert invite.status_code == 201
        accept = await client.post(
            f"{API}/projects/{project_id}/invitation/accept", headers=headers
        )
        assert accept.status_code == 200
        return user_id, headers

    return _add_member
