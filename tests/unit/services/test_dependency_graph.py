from uuid import uuid4

import pytest

from src.app.services.dependency_graph import DependencyGraph
from src.domain.entities import DependencyType, Task, TaskDependency, TaskStatus


def wire_edges(mock_uow, edges):
    """Back get_by_dependent with an in-memory edge list"""

    async def get_by_dependent(task_id):
        return [edge for edge in edges if edge.dependent_task_id == task_id]

    mock_uow.task_dependencies.get_by_dependent.side_effect = get_by_dependent


def edge(dependent, depends_on, dependency_type=DependencyType.blocks):
    return TaskDependency(
        dependent_task_id=dependent, depends_on_task_id=depends_on, dependency_type=dependency_type
    )


@pytest.mark.asyncio
async def test_reverse_edge_is_a_cycle(mock_uow):
    a, b = uuid4(), uuid4()
    wire_edges(mock_uow, [edge(a, b)])
    graph = DependencyGraph(mock_uow)

    assert await graph.would_create_cycle(b, a) is True


@pytest.mark.asyncio
async def test_transitive_cycle_is_detected(mock_uow):
    a, b, c = uuid4(), uuid4(), uuid4()
    # a -> b -> c, adding c -> a closes the loop
    wire_edges(mock_uow, [edge(a, b), edge(b, c)])
    graph = DependencyGraph(mock_uow)

    assert await graph.would_create_cycle(c, a) is True


@pytest.mark.asyncio
async def test_diamond_is_not_a_cycle(mock_uow):
    a, b, c, d = uuid4(), uuid4(), uuid4(), uuid4()
    wire_edges(mock_uow, [edge(a, b), edge(a, c), edge(b, d)])
    graph = DependencyGraph(mock_uow)

    assert await graph.would_create_cycle(c, d) is False


@pytest.mark.asyncio
async def test_empty_graph_has_no_cycle(mock_uow):
    wire_edges(mock_uow, [])
    graph = DependencyGraph(mock_uow)

    assert await graph.would_create_cycle(uuid4(), uuid4()) is False


@pytest.mark.asyncio
async def test_related_edges_count_towards_cycles_by_default(mock_uow):
    a, b = uuid4(), uuid4()
    wire_edges(mock_uow, [edge(a, b, DependencyType.related)])

    assert await DependencyGraph(mock_uow).would_create_cycle(b, a) is True


@pytest.mark.asyncio
async def test_related_edges_ignored_when_configured(mock_uow):
    a, b = uuid4(), uuid4()
    wire_edges(mock_uow, [edge(a, b, DependencyType.related)])
    graph = DependencyGraph(mock_uow, include_related_in_cycle_check=False)

    assert await graph.would_create_cycle(b, a, DependencyType.blocks) is False
    assert await graph.would_create_cycle(b, a, DependencyType.related) is False


@pytest.mark.asyncio
async def test_blocking_tasks_are_open_blocks_targets_only(mock_uow):
    task_id = uuid4()
    open_blocker = Task(id=uuid4(), project_id=uuid4(), title="open", creator_id=uuid4())
    done_blocker = Task(
        id=uuid4(), project_id=uuid4(), title="done", creator_id=uuid4(), status=TaskStatus.done
    )
    related = uuid4()
    wire_edges(
        mock_uow,
        [
            edge(task_id, open_blocker.id),
            edge(task_id, done_blocker.id),
            edge(task_id, related, DependencyType.related),
        ],
    )
    mock_uow.tasks.get_by_ids.return_value = [open_blocker, done_blocker]
    graph = DependencyGraph(mock_uow)

    blocking = await graph.get_blocking_tasks(task_id)

    assert blocking == [open_blocker]
    mock_uow.tasks.get_by_ids.assert_called_once_with([open_blocker.id, done_blocker.id])
    assert await graph.is_task_blocked(task_id) is True


@pytest.mark.asyncio
async def test_task_whose_blockers_are_done_is_not_blocked(mock_uow):
    task_id = uuid4()
    wire_edges(mock_uow, [])
    mock_uow.tasks.get_by_ids.return_value = []

    assert await DependencyGraph(mock_uow).is_task_blocked(task_id) is False
