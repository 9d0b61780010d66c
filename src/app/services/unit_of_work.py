from abc import ABC, abstractmethod

from src.app.repositories.activity_log_repository import IActivityLogRepository
from src.app.repositories.invite_link_repository import IInviteLinkRepository
from src.app.repositories.membership_repository import IProjectMembershipRepository
from src.app.repositories.notification_repository import INotificationRepository
from src.app.repositories.project_repository import IProjectRepository
from src.app.repositories.role_repository import IRoleRepository
from src.app.repositories.task_dependency_repository import ITaskDependencyRepository
from src.app.repositories.task_repository import ITaskRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    projects: IProjectRepository
    memberships: IProjectMembershipRepository
    roles: IRoleRepository
    invite_links: IInviteLinkRepository
    tasks: ITaskRepository
    task_dependencies: ITaskDependencyRepository
    activity_logs: IActivityLogRepository
    notifications: INotificationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
