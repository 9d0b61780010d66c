from .create_task_use_case import CreateTaskUseCase
from .update_task_status_use_case import UpdateTaskStatusUseCase

__all__ = ["CreateTaskUseCase", "UpdateTaskStatusUseCase"]
