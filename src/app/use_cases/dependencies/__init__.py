from .add_dependency_use_case import AddDependencyUseCase
from .get_project_dependencies_use_case import GetProjectDependenciesUseCase
from .get_task_dependencies_use_case import GetTaskDependenciesUseCase
from .get_task_dependents_use_case import GetTaskDependentsUseCase
from .remove_dependency_use_case import RemoveDependencyUseCase

__all__ = [
    "AddDependencyUseCase",
    "GetProjectDependenciesUseCase",
    "GetTaskDependenciesUseCase",
    "GetTaskDependentsUseCase",
    "RemoveDependencyUseCase",
]
