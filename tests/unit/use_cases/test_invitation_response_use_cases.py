from uuid import uuid4

import pytest

from src.app.use_cases.memberships import (
    AcceptInvitationUseCase,
    DeclineInvitationUseCase,
    GetInvitationDetailsUseCase,
)
from src.domain.entities import ActivityLog, MembershipStatus, Project, ProjectMembership, User
from src.domain.errors import ErrorCode
from src.domain.role_hierarchy import RoleName


def pending(project_id, user_id, role_id=4):
    return ProjectMembership(
        project_id=project_id, user_id=user_id, role_id=role_id, status=MembershipStatus.pending
    )


@pytest.mark.asyncio
async def test_accept_activates_pending_membership(mock_uow, side_effects):
    project_id, user_id = uuid4(), uuid4()
    membership = pending(project_id, user_id)
    mock_uow.memberships.get.return_value = membership

    result = await AcceptInvitationUseCase(mock_uow, side_effects).execute(project_id, user_id)

    assert result.is_ok()
    assert result.value.status == "active"
    assert membership.status == MembershipStatus.active
    mock_uow.memberships.update.assert_called_once_with(membership)
    mock_uow.commit.assert_called_once()
    side_effects.invalidate.assert_called_once_with(f"projects:{user_id}")


@pytest.mark.asyncio
async def test_accept_twice_is_a_conflict(mock_uow, side_effects):
    project_id, user_id = uuid4(), uuid4()
    membership = pending(project_id, user_id)
    membership.status = MembershipStatus.active
    mock_uow.memberships.get.return_value = membership

    result = await AcceptInvitationUseCase(mock_uow, side_effects).execute(project_id, user_id)

    assert result.is_err()
    assert result.error.code == ErrorCode.ALREADY_ACTIVE
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_accept_without_invitation(mock_uow, side_effects):
    mock_uow.memberships.get.return_value = None

    result = await AcceptInvitationUseCase(mock_uow, side_effects).execute(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == ErrorCode.INVITATION_NOT_FOUND


@pytest.mark.asyncio
async def test_decline_deletes_the_row(mock_uow, side_effects):
    project_id, user_id = uuid4(), uuid4()
    membership = pending(project_id, user_id)
    mock_uow.memberships.get.return_value = membership

    result = await DeclineInvitationUseCase(mock_uow, side_effects).execute(project_id, user_id)

    assert result.is_ok()
    assert result.value.status == "declined"
    mock_uow.memberships.delete.assert_called_once_with(membership)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_active_member_cannot_decline(mock_uow, side_effects):
    membership = pending(uuid4(), uuid4())
    membership.status = MembershipStatus.active
    mock_uow.memberships.get.return_value = membership

    result = await DeclineInvitationUseCase(mock_uow, side_effects).execute(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == ErrorCode.ALREADY_ACTIVE
    mock_uow.memberships.delete.assert_not_called()


@pytest.mark.asyncio
async def test_invitation_details_name_the_inviter_from_activity(mock_uow, roles):
    owner = User(id=uuid4(), email="owner@example.com", name="Olivia")
    inviter = User(id=uuid4(), email="admin@example.com", name="Adam")
    invitee_id = uuid4()
    project = Project(id=uuid4(), name="Apollo", owner_id=owner.id)
    mock_uow.memberships.get.return_value = pending(
        project.id, invitee_id, roles[RoleName.member].id
    )
    mock_uow.projects.get_by_id.return_value = project
    mock_uow.roles.get_by_id.return_value = roles[RoleName.member]
    mock_uow.activity_logs.get_latest.return_value = ActivityLog(
        user_id=inviter.id,
        action="invite_member",
        entity_id=project.id,
        entity_type="project",
        event_metadata={"target_user_id": str(invitee_id)},
    )
    mock_uow.users.get_by_id.return_value = inviter

    result = await GetInvitationDetailsUseCase(mock_uow).execute(project.id, invitee_id)

    assert result.is_ok()
    assert result.value.inviter.name == "Adam"
    assert result.value.role.name == "member"
    assert result.value.invitation_status == "pending"
    mock_uow.activity_logs.get_latest.assert_called_once_with(
        project.id, "invite_member", target_user_id=invitee_id
    )
    mock_uow.users.get_by_id.assert_called_once_with(inviter.id)


@pytest.mark.asyncio
async def test_invitation_details_fall_back_to_owner(mock_uow, roles):
    owner = User(id=uuid4(), email="owner@example.com", name="Olivia")
    project = Project(id=uuid4(), name="Apollo", owner_id=owner.id)
    mock_uow.memberships.get.return_value = pending(project.id, uuid4())
    mock_uow.projects.get_by_id.return_value = project
    mock_uow.roles.get_by_id.return_value = roles[RoleName.member]
    mock_uow.activity_logs.get_latest.return_value = None
    mock_uow.users.get_by_id.return_value = owner

    result = await GetInvitationDetailsUseCase(mock_uow).execute(project.id, uuid4())

    assert result.is_ok()
    assert result.value.inviter.email == "owner@example.com"
    mock_uow.users.get_by_id.assert_called_once_with(owner.id)
