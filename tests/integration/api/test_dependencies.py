import pytest
from httpx import AsyncClient

from config import ApplicationConfig

API = ApplicationConfig.API_PREFIX


async def create_task(client, project_id, headers, title):
    response = await client.post(
        f"{API}/projects/{project_id}/tasks", json={"title": title}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


async def add_dependency(client, task_id, depends_on, headers, dependency_type="blocks"):
    return await client.post(
        f"{API}/tasks/{task_id}/dependencies",
        json={"depends_on_task_id": depends_on, "dependency_type": dependency_type},
        headers=headers,
    )


@pytest.mark.asyncio
async def test_reverse_dependency_is_cyclic(client: AsyncClient, make_user, make_project):
    _, headers = await make_user("owner@example.com")
    project_id = await make_project(headers)
    a = await create_task(client, project_id, headers, "A")
    b = await create_task(client, project_id, headers, "B")

    first = await add_dependency(client, a, b, headers)
    second = await add_dependency(client, b, a, headers)

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json()["error"]["code"] == "CYCLIC_DEPENDENCY"

    graph = await client.get(f"{API}/projects/{project_id}/dependencies", headers=headers)
    assert graph.status_code == 200
    assert len(graph.json()["dependencies"]) == 1


@pytest.mark.asyncio
async def test_transitive_cycle(client: AsyncClient, make_user, make_project):
    _, headers = await make_user("owner@example.com")
    project_id = await make_project(headers)
    a, b, c = [await create_task(client, project_id, headers, t) for t in "ABC"]

    assert (await add_dependency(client, a, b, headers)).status_code == 201
    assert (await add_dependency(client, b, c, headers)).status_code == 201
    response = await add_dependency(client, c, a, headers)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "CYCLIC_DEPENDENCY"


@pytest.mark.asyncio
async def test_self_and_duplicate_dependencies(client: AsyncClient, make_user, make_project):
    _, headers = await make_user("owner@example.com")
    project_id = await make_project(headers)
    a = await create_task(client, project_id, headers, "A")
    b = await create_task(client, project_id, headers, "B")

    own = await add_dependency(client, a, a, headers)
    assert own.status_code == 400
    assert own.json()["error"]["code"] == "SELF_DEPENDENCY"

    assert (await add_dependency(client, a, b, headers)).status_code == 201
    duplicate = await add_dependency(client, a, b, headers, "related")
    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "DUPLICATE_DEPENDENCY"


@pytest.mark.asyncio
async def test_cross_project_dependency(client: AsyncClient, make_user, make_project):
    _, headers = await make_user("owner@example.com")
    apollo = await make_project(headers, "Apollo")
    gemini = await make_project(headers, "Gemini")
    a = await create_task(client, apollo, headers, "A")
    g = await create_task(client, gemini, headers, "G")

    response = await add_dependency(client, a, g, headers)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "CROSS_PROJECT_DEPENDENCY"


@pytest.mark.asyncio
async def test_blocked_until_blocker_done(client: AsyncClient, make_user, make_project):
    _, headers = await make_user("owner@example.com")
    project_id = await make_project(headers)
    a = await create_task(client, project_id, headers, "A")
    b = await create_task(client, project_id, headers, "B")
    await add_dependency(client, a, b, headers)

    blocked = await client.get(f"{API}/tasks/{a}/dependencies", headers=headers)
    assert blocked.json()["is_blocked"] is True
    assert [t["id"] for t in blocked.json()["blocking_tasks"]] == [b]

    done = await client.patch(f"{API}/tasks/{b}/status", json={"status": "done"}, headers=headers)
    assert done.status_code == 200

    unblocked = await client.get(f"{API}/tasks/{a}/dependencies", headers=headers)
    assert unblocked.json()["is_blocked"] is False

    dependents = await client.get(f"{API}/tasks/{b}/dependents", headers=headers)
    assert [d["dependent_task_id"] for d in dependents.json()["dependents"]] == [a]


@pytest.mark.asyncio
async def test_remove_dependency_is_idempotent(client: AsyncClient, make_user, make_project):
    _, headers = await make_user("owner@example.com")
    project_id = await make_project(headers)
    a = await create_task(client, project_id, headers, "A")
    b = await create_task(client, project_id, headers, "B")
    await add_dependency(client, a, b, headers)

    first = await client.delete(f"{API}/tasks/{a}/dependencies/{b}", headers=headers)
    second = await client.delete(f"{API}/tasks/{a}/dependencies/{b}", headers=headers)

    assert first.status_code == 200
    assert first.json()["removed"] is True
    assert second.status_code == 200
    assert second.json()["removed"] is False

    # B -> A is now allowed
    assert (await add_dependency(client, b, a, headers)).status_code == 201


@pytest.mark.asyncio
async def test_viewer_cannot_add_dependency(client: AsyncClient, make_user, make_project, add_member):
    _, owner_headers = await make_user("owner@example.com")
    project_id = await make_project(owner_headers)
    a = await create_task(client, project_id, owner_headers, "A")
    b = await create_task(client, project_id, owner_headers, "B")
    _, viewer_headers = await add_member(project_id, owner_headers, "v@example.com", "viewer")

    response = await add_dependency(client, a, b, viewer_headers)

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "INSUFFICIENT_PERMISSION"

    readable = await client.get(f"{API}/tasks/{a}/dependencies", headers=viewer_headers)
    assert readable.status_code == 200


@pytest.mark.asyncio
async def test_unknown_task(client: AsyncClient, make_user):
    _, headers = await make_user("owner@example.com")

    response = await client.get(
        f"{API}/tasks/00000000-0000-0000-0000-000000000000/dependencies", headers=headers
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TASK_NOT_FOUND"


@pytest.mark.asyncio
async def test_contributor_cannot_create_tasks(client: AsyncClient, make_user, make_project, add_member):
    _, owner_headers = await make_user("owner@example.com")
    project_id = await make_project(owner_headers)
    _, contributor_headers = await add_member(
        project_id, owner_headers, "c@example.com", "contributor"
    )

    response = await client.post(
        f"{API}/projects/{project_id}/tasks", json={"title": "X"}, headers=contributor_headers
    )

    assert response.status_code == 403
