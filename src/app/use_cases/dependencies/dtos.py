"""
Dependency Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel


class TaskSummary(BaseModel):
    id: str
    title: str
    status: str


class DependencyResponse(BaseModel):
    """
    A single edge: dependent_task_id depends on depends_on_task_id.

    task is the task on the other end of the edge, filled in by the
    per-task reads.
    """

    dependent_task_id: str
    depends_on_task_id: str
    dependency_type: str
    created_at: str
    task: Optional[TaskSummary] = None


class RemoveDependencyResponse(BaseModel):
    dependent_task_id: str
    depends_on_task_id: str
    removed: bool


class TaskDependenciesResponse(BaseModel):
    """Outgoing edges of a task plus its blocked state"""

    task_id: str
    dependencies: List[DependencyResponse]
    is_blocked: bool
    blocking_tasks: List[TaskSummary]


class TaskDependentsResponse(BaseModel):
    """Incoming edges of a task: what waits on it"""

    task_id: str
    dependents: List[DependencyResponse]


class ProjectDependenciesResponse(BaseModel):
    project_id: str
    dependencies: List[DependencyResponse]
