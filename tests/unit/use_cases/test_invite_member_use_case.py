from uuid import uuid4

import pytest

from src.app.use_cases.memberships import InviteMemberUseCase
from src.domain.entities import MembershipStatus, Project, ProjectMembership, User
from src.domain.errors import ErrorCode, UniqueViolation
from src.domain.role_hierarchy import RoleName


@pytest.fixture
def project():
    return Project(id=uuid4(), name="Apollo", owner_id=uuid4())


@pytest.fixture
def inviter(project):
    return User(id=project.owner_id, email="owner@example.com", name="Olivia")


def arrange(mock_uow, roles, roles_by_id, project, inviter, inviter_role, target_role, invitee=None):
    mock_uow.projects.lock.return_value = project
    inviter_membership = ProjectMembership(
        project_id=project.id,
        user_id=inviter.id,
        role_id=roles[inviter_role].id,
        status=MembershipStatus.active,
    )
    mock_uow.memberships.get.side_effect = [inviter_membership, None]

    async def get_role(role_id):
        return roles_by_id.get(role_id)

    mock_uow.roles.get_by_id.side_effect = get_role
    mock_uow.users.get_by_email.return_value = invitee
    mock_uow.users.get_by_id.return_value = inviter

    async def create_user(user):
        return user

    mock_uow.users.create.side_effect = create_user
    return roles[target_role].id, inviter_membership


@pytest.mark.asyncio
async def test_owner_invites_unknown_email_as_member(
    mock_uow, side_effects, roles, roles_by_id, project, inviter
):
    role_id, _ = arrange(
        mock_uow, roles, roles_by_id, project, inviter, RoleName.owner, RoleName.member
    )

    result = await InviteMemberUseCase(mock_uow, side_effects, "https://app.test/").execute(
        inviter.id, project.id, " New.Person@Example.com ", role_id
    )

    assert result.is_ok()
    assert result.value.status == "pending"
    assert result.value.role == "member"
    assert result.value.email == "new.person@example.com"

    placeholder = mock_uow.users.create.call_args.args[0]
    assert placeholder.email == "new.person@example.com"
    assert placeholder.name == "new.person"

    membership = mock_uow.memberships.create.call_args.args[0]
    assert membership.status == MembershipStatus.pending
    assert membership.role_id == role_id
    mock_uow.commit.assert_called_once()

    to, subject, html = side_effects.send_email.call_args.args
    assert to == "new.person@example.com"
    assert "Apollo" in subject
    assert f"https://app.test/invitations/{project.id}" in html

    notify_args = side_effects.notify.call_args.args
    assert notify_args[1] == "invite"
    assert notify_args[4] == f"/invitations/{project.id}"

    log_args = side_effects.log_activity.call_args.args
    assert log_args[1] == "invite_member"
    assert log_args[4]["target_user_id"] == str(placeholder.id)


@pytest.mark.asyncio
async def test_existing_user_is_not_duplicated(
    mock_uow, side_effects, roles, roles_by_id, project, inviter
):
    invitee = User(id=uuid4(), email="bob@example.com", name="Bob")
    role_id, _ = arrange(
        mock_uow, roles, roles_by_id, project, inviter, RoleName.owner, RoleName.viewer, invitee
    )

    result = await InviteMemberUseCase(mock_uow, side_effects).execute(
        inviter.id, project.id, "bob@example.com", role_id
    )

    assert result.is_ok()
    assert result.value.user_id == str(invitee.id)
    mock_uow.users.create.assert_not_called()


@pytest.mark.asyncio
async def test_admin_cannot_invite_admin(
    mock_uow, side_effects, roles, roles_by_id, project, inviter
):
    role_id, _ = arrange(
        mock_uow, roles, roles_by_id, project, inviter, RoleName.admin, RoleName.admin
    )

    result = await InviteMemberUseCase(mock_uow, side_effects).execute(
        inviter.id, project.id, "peer@example.com", role_id
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.INSUFFICIENT_RANK
    mock_uow.memberships.create.assert_not_called()
    side_effects.send_email.assert_not_called()


@pytest.mark.asyncio
async def test_nobody_can_invite_an_owner(
    mock_uow, side_effects, roles, roles_by_id, project, inviter
):
    role_id, _ = arrange(
        mock_uow, roles, roles_by_id, project, inviter, RoleName.owner, RoleName.owner
    )

    result = await InviteMemberUseCase(mock_uow, side_effects).execute(
        inviter.id, project.id, "second-owner@example.com", role_id
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.INSUFFICIENT_RANK


@pytest.mark.asyncio
async def test_unknown_role_is_rejected(
    mock_uow, side_effects, roles, roles_by_id, project, inviter
):
    arrange(mock_uow, roles, roles_by_id, project, inviter, RoleName.owner, RoleName.member)

    result = await InviteMemberUseCase(mock_uow, side_effects).execute(
        inviter.id, project.id, "x@example.com", 999
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.INVALID_ROLE


@pytest.mark.asyncio
async def test_existing_membership_is_a_conflict(
    mock_uow, side_effects, roles, roles_by_id, project, inviter
):
    invitee = User(id=uuid4(), email="bob@example.com")
    role_id, inviter_membership = arrange(
        mock_uow, roles, roles_by_id, project, inviter, RoleName.owner, RoleName.member, invitee
    )
    mock_uow.memberships.get.side_effect = [
        inviter_membership,
        ProjectMembership(project_id=project.id, user_id=invitee.id, role_id=role_id),
    ]

    result = await InviteMemberUseCase(mock_uow, side_effects).execute(
        inviter.id, project.id, "bob@example.com", role_id
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.ALREADY_MEMBER
    mock_uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
async def test_concurrent_insert_maps_to_conflict(
    mock_uow, side_effects, roles, roles_by_id, project, inviter
):
    role_id, _ = arrange(
        mock_uow, roles, roles_by_id, project, inviter, RoleName.owner, RoleName.member
    )
    mock_uow.memberships.create.side_effect = UniqueViolation("project_members")

    result = await InviteMemberUseCase(mock_uow, side_effects).execute(
        inviter.id, project.id, "racer@example.com", role_id
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.ALREADY_MEMBER
    mock_uow.rollback.assert_called_once()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_pending_inviter_cannot_invite(
    mock_uow, side_effects, roles, roles_by_id, project, inviter
):
    role_id, inviter_membership = arrange(
        mock_uow, roles, roles_by_id, project, inviter, RoleName.admin, RoleName.member
    )
    inviter_membership.status = MembershipStatus.pending

    result = await InviteMemberUseCase(mock_uow, side_effects).execute(
        inviter.id, project.id, "x@example.com", role_id
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.NOT_A_MEMBER


@pytest.mark.asyncio
async def test_missing_project(mock_uow, side_effects):
    mock_uow.projects.lock.return_value = None

    result = await InviteMemberUseCase(mock_uow, side_effects).execute(
        uuid4(), uuid4(), "x@example.com", 1
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.PROJECT_NOT_FOUND


@pytest.mark.asyncio
async def test_placeholder_created_concurrently_is_reused(
    mock_uow, side_effects, roles, roles_by_id, project, inviter
):
    role_id, _ = arrange(
        mock_uow, roles, roles_by_id, project, inviter, RoleName.owner, RoleName.member
    )
    raced = User(id=uuid4(), email="racer@example.com", name="racer")
    mock_uow.users.get_by_email.side_effect = [None, raced]
    mock_uow.users.create.side_effect = UniqueViolation("users")

    result = await InviteMemberUseCase(mock_uow, side_effects).execute(
        inviter.id, project.id, "racer@example.com", role_id
    )

    assert result.is_ok()
    assert result.value.user_id == str(raced.id)
    mock_uow.rollback.assert_called_once()
    membership = mock_uow.memberships.create.call_args.args[0]
    assert membership.user_id == raced.id
    mock_uow.commit.assert_called_once()
