from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.activity_log_repository import ActivityLogRepository
from src.adapter.repositories.invite_link_repository import InviteLinkRepository
from src.adapter.repositories.membership_repository import ProjectMembershipRepository
from src.adapter.repositories.notification_repository import NotificationRepository
from src.adapter.repositories.project_repository import ProjectRepository
from src.adapter.repositories.role_repository import RoleRepository
from src.adapter.repositories.task_dependency_repository import TaskDependencyRepository
from src.adapter.repositories.task_repository import TaskRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.projects = ProjectRepository(self.session)
        self.memberships = ProjectMembershipRepository(self.session)
        self.roles = RoleRepository(self.session)
        self.invite_links = InviteLinkRepository(self.session)
        self.tasks = TaskRepository(self.session)
        self.task_dependencies = TaskDependencyRepository(self.session)
        self.activity_logs = ActivityLogRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
