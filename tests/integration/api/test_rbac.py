import pytest
from httpx import AsyncClient

from config import ApplicationConfig

API = ApplicationConfig.API_PREFIX


@pytest.mark.asyncio
async def test_role_catalog(client: AsyncClient, make_user):
    _, headers = await make_user("someone@example.com")

    response = await client.get(f"{API}/rbac/roles", headers=headers)

    assert response.status_code == 200
    roles = response.json()
    assert [r["name"] for r in roles] == [
        "owner",
        "admin",
        "project_manager",
        "member",
        "contributor",
        "viewer",
        "guest",
    ]
    assert "project:delete" in roles[0]["permissions"]
    assert "project:delete" not in roles[1]["permissions"]


@pytest.mark.asyncio
async def test_permission_catalog(client: AsyncClient, make_user):
    _, headers = await make_user("someone@example.com")

    response = await client.get(f"{API}/rbac/permissions", headers=headers)

    assert response.status_code == 200
    assert len(response.json()) == 19


@pytest.mark.asyncio
async def test_permission_check(client: AsyncClient, make_user, make_project, add_member):
    _, owner_headers = await make_user("owner@example.com")
    project_id = await make_project(owner_headers)
    _, viewer_headers = await add_member(project_id, owner_headers, "v@example.com", "viewer")
    _, outsider_headers = await make_user("outsider@example.com")
    url = f"{API}/projects/{project_id}/permissions/check"

    allowed = await client.get(url, params={"permission": "task:view"}, headers=viewer_headers)
    denied = await client.get(url, params={"permission": "task:create"}, headers=viewer_headers)
    outsider = await client.get(url, params={"permission": "task:view"}, headers=outsider_headers)

    assert allowed.json() == {"permission": "task:view", "allowed": True, "reason": None}
    assert denied.json()["allowed"] is False
    assert denied.json()["reason"] == "INSUFFICIENT_PERMISSION"
    assert outsider.json()["reason"] == "NOT_A_MEMBER"
