from unittest.mock import AsyncMock, MagicMock

import pytest

from src.domain.entities import Role
from src.domain.permissions import ROLE_DESCRIPTIONS
from src.domain.role_hierarchy import RoleName


def _repository(*methods):
    repository = MagicMock()
    for method in methods:
        setattr(repository, method, AsyncMock())
    return repository


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = _repository("get_by_email", "get_by_id", "get_by_ids", "create")
    uow.projects = _repository("get_by_id", "get_by_ids", "lock", "create")
    uow.memberships = _repository(
        "get", "get_by_project_id", "get_active_by_user_id", "create", "update", "delete"
    )
    uow.roles = _repository(
        "get_by_id",
        "get_by_name",
        "get_all",
        "create",
        "get_permission_names",
        "get_permission_by_name",
        "get_all_permissions",
        "create_permission",
        "grant",
    )
    uow.invite_links = _repository("get_by_token", "create", "consume")
    uow.tasks = _repository("get_by_id", "get_by_ids", "get_ids_by_project_id", "create", "update")
    uow.task_dependencies = _repository(
        "get", "get_by_dependent", "get_by_depends_on", "get_touching", "create", "delete"
    )
    uow.activity_logs = _repository("create", "get_latest")
    uow.notifications = _repository("create")
    return uow


@pytest.fixture
def side_effects():
    """SideEffects double: every channel is an AsyncMock"""
    effects = MagicMock()
    effects.log_activity = AsyncMock()
    effects.notify = AsyncMock()
    effects.send_email = AsyncMock()
    effects.invalidate = AsyncMock()
    return effects


@pytest.fixture
def roles():
    """One Role row per RoleName, ids by ascending rank"""
    return {
        name: Role(id=name.rank + 1, name=name.value, description=ROLE_DESCRIPTIONS[name])
        for name in RoleName
    }


@pytest.fixture
def roles_by_id(roles):
    return {role.id: role for role in roles.values()}
