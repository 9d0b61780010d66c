from uuid import uuid4

import pytest

from src.app.use_cases.memberships import GetInvitableRolesUseCase, UpdateMemberRoleUseCase
from src.domain.entities import MembershipStatus, ProjectMembership
from src.domain.errors import ErrorCode
from src.domain.role_hierarchy import RoleName


@pytest.fixture
def arrange(mock_uow, roles, roles_by_id):
    def _arrange(actor_role, target_role, same_user=False):
        project_id, actor_id = uuid4(), uuid4()
        target_id = actor_id if same_user else uuid4()
        actor = ProjectMembership(
            project_id=project_id,
            user_id=actor_id,
            role_id=roles[actor_role].id,
            status=MembershipStatus.active,
        )
        target = actor if same_user else ProjectMembership(
            project_id=project_id,
            user_id=target_id,
            role_id=roles[target_role].id,
            status=MembershipStatus.active,
        )
        mock_uow.memberships.get.side_effect = [actor, target]

        async def get_role(role_id):
            return roles_by_id.get(role_id)

        mock_uow.roles.get_by_id.side_effect = get_role
        return project_id, actor_id, target_id, target

    return _arrange


@pytest.mark.asyncio
async def test_admin_promotes_viewer_to_member(mock_uow, side_effects, roles, arrange):
    project_id, actor_id, target_id, target = arrange(RoleName.admin, RoleName.viewer)

    result = await UpdateMemberRoleUseCase(mock_uow, side_effects).execute(
        actor_id, project_id, target_id, roles[RoleName.member].id
    )

    assert result.is_ok()
    assert result.value.old_role == "viewer"
    assert result.value.new_role == "member"
    assert target.role_id == roles[RoleName.member].id
    mock_uow.memberships.update.assert_called_once_with(target)
    mock_uow.commit.assert_called_once()
    side_effects.invalidate.assert_called_once_with(f"projects:{target_id}")


@pytest.mark.asyncio
async def test_cannot_promote_to_own_rank(mock_uow, side_effects, roles, arrange):
    project_id, actor_id, target_id, target = arrange(RoleName.admin, RoleName.member)

    result = await UpdateMemberRoleUseCase(mock_uow, side_effects).execute(
        actor_id, project_id, target_id, roles[RoleName.admin].id
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.INSUFFICIENT_RANK
    assert target.role_id == roles[RoleName.member].id


@pytest.mark.asyncio
async def test_member_cannot_promote_member_to_admin(mock_uow, side_effects, roles, arrange):
    project_id, actor_id, target_id, target = arrange(RoleName.member, RoleName.member)

    result = await UpdateMemberRoleUseCase(mock_uow, side_effects).execute(
        actor_id, project_id, target_id, roles[RoleName.admin].id
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.INSUFFICIENT_RANK
    assert target.role_id == roles[RoleName.member].id
    mock_uow.memberships.update.assert_not_called()
    side_effects.invalidate.assert_not_called()


@pytest.mark.asyncio
async def test_cannot_demote_a_peer(mock_uow, side_effects, roles, arrange):
    project_id, actor_id, target_id, _ = arrange(RoleName.admin, RoleName.admin)

    result = await UpdateMemberRoleUseCase(mock_uow, side_effects).execute(
        actor_id, project_id, target_id, roles[RoleName.viewer].id
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.INSUFFICIENT_RANK


@pytest.mark.asyncio
async def test_owner_role_is_immutable(mock_uow, side_effects, roles, arrange):
    project_id, actor_id, target_id, _ = arrange(RoleName.admin, RoleName.owner)

    result = await UpdateMemberRoleUseCase(mock_uow, side_effects).execute(
        actor_id, project_id, target_id, roles[RoleName.member].id
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.OWNER_IMMUTABLE


@pytest.mark.asyncio
async def test_nobody_is_promoted_to_owner(mock_uow, side_effects, roles, arrange):
    project_id, actor_id, target_id, _ = arrange(RoleName.owner, RoleName.admin)

    result = await UpdateMemberRoleUseCase(mock_uow, side_effects).execute(
        actor_id, project_id, target_id, roles[RoleName.owner].id
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.OWNER_IMMUTABLE


@pytest.mark.asyncio
async def test_own_role_cannot_change(mock_uow, side_effects, roles, arrange):
    project_id, actor_id, target_id, _ = arrange(RoleName.admin, RoleName.admin, same_user=True)

    result = await UpdateMemberRoleUseCase(mock_uow, side_effects).execute(
        actor_id, project_id, target_id, roles[RoleName.viewer].id
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.SELF_ROLE_CHANGE


@pytest.mark.asyncio
async def test_unknown_new_role(mock_uow, side_effects, arrange):
    project_id, actor_id, target_id, _ = arrange(RoleName.owner, RoleName.member)

    result = await UpdateMemberRoleUseCase(mock_uow, side_effects).execute(
        actor_id, project_id, target_id, 999
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.INVALID_ROLE


@pytest.mark.asyncio
async def test_invitable_roles_for_project_manager(mock_uow, roles):
    mock_uow.memberships.get.return_value = ProjectMembership(
        project_id=uuid4(),
        user_id=uuid4(),
        role_id=roles[RoleName.project_manager].id,
        status=MembershipStatus.active,
    )
    mock_uow.roles.get_by_id.return_value = roles[RoleName.project_manager]

    async def get_by_name(name):
        return roles[RoleName(name)]

    mock_uow.roles.get_by_name.side_effect = get_by_name

    result = await GetInvitableRolesUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.is_ok()
    assert result.value.current_role == "project_manager"
    assert [r.name for r in result.value.roles] == ["member", "contributor", "viewer", "guest"]
