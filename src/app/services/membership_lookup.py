from typing import Optional, Tuple
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ProjectMembership, Role


async def load_member_role(
    uow: UnitOfWork, project_id: UUID, user_id: UUID
) -> Tuple[Optional[ProjectMembership], Optional[Role]]:
    """Membership of user_id in project_id together with its role row"""
    membership = await uow.memberships.get(project_id, user_id)
    if membership is None:
        return None, None
    role = await uow.roles.get_by_id(membership.role_id)
    return membership, role
