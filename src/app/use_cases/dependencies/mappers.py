from typing import Optional

from src.domain.entities import Task, TaskDependency

from .dtos import DependencyResponse, TaskSummary


def to_task_summary(task: Task) -> TaskSummary:
    return TaskSummary(id=str(task.id), title=task.title, status=task.status.value)


def to_dependency_response(
    edge: TaskDependency, other_task: Optional[Task] = None
) -> DependencyResponse:
    return DependencyResponse(
        dependent_task_id=str(edge.dependent_task_id),
        depends_on_task_id=str(edge.depends_on_task_id),
        dependency_type=edge.dependency_type.value,
        created_at=edge.created_at.isoformat(),
        task=to_task_summary(other_task) if other_task else None,
    )
