from uuid import uuid4

import pytest

from taskflow.app.use_cases.workspaces import UpdateMemberRoleUseCase
from taskflow.domain.entities import User, WorkspaceMember, WorkspaceRole
from taskflow.libs.result import ErrorKind


@pytest.fixture
def workspace_id():
    return uuid4()


def member(workspace_id, role):
    return WorkspaceMember(workspace_id=workspace_id, user_id=uuid4(), role=role)


def lookup(*memberships):
    by_user = {m.user_id: m for m in memberships}

    async def get_by_workspace_and_user(workspace_id, user_id):
        return by_user.get(user_id)

    return get_by_workspace_and_user


@pytest.mark.asyncio
async def test_admin_promotes_member_to_admin(mock_uow, workspace_id):
    admin = member(workspace_id, WorkspaceRole.admin)
    target = member(workspace_id, WorkspaceRole.member)
    mock_uow.members.get_by_workspace_and_user.side_effect = lookup(admin, target)
    mock_uow.users.get_by_id.return_value = User(
        id=target.user_id, email="bob@example.com", password_hash="x" * 60
    )

    result = await UpdateMemberRoleUseCase(mock_uow).execute(
        admin.user_id, workspace_id, target.user_id, WorkspaceRole.admin
    )

    assert result.is_ok()
    assert result.value.role == WorkspaceRole.admin
    assert result.value.email == "bob@example.com"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_sole_owner_cannot_be_downgraded(mock_uow, workspace_id):
    owner = member(workspace_id, WorkspaceRole.owner)
    mock_uow.members.get_by_workspace_and_user.side_effect = lookup(owner)
    mock_uow.members.count_owners_for_update.return_value = 1

    result = await UpdateMemberRoleUseCase(mock_uow).execute(
        owner.user_id, workspace_id, owner.user_id, WorkspaceRole.admin
    )

    assert result.error.code == "CANNOT_DOWNGRADE_LAST_OWNER"
    assert result.error.kind == ErrorKind.validation
    assert owner.role == WorkspaceRole.owner
    mock_uow.members.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_owner_keeps_owner_role_without_owner_count(mock_uow, workspace_id):
    owner = member(workspace_id, WorkspaceRole.owner)
    mock_uow.members.get_by_workspace_and_user.side_effect = lookup(owner)
    mock_uow.users.get_by_id.return_value = User(
        id=owner.user_id, email="alice@example.com", password_hash="x" * 60
    )

    result = await UpdateMemberRoleUseCase(mock_uow).execute(
        owner.user_id, workspace_id, owner.user_id, WorkspaceRole.owner
    )

    assert result.is_ok()
    mock_uow.members.count_owners_for_update.assert_not_awaited()


@pytest.mark.asyncio
async def test_admin_cannot_grant_owner(mock_uow, workspace_id):
    admin = member(workspace_id, WorkspaceRole.admin)
    target = member(workspace_id, WorkspaceRole.member)
    mock_uow.members.get_by_workspace_and_user.side_effect = lookup(admin, target)

    result = await UpdateMemberRoleUseCase(mock_uow).execute(
        admin.user_id, workspace_id, target.user_id, WorkspaceRole.owner
    )

    assert result.error.kind == ErrorKind.forbidden
    assert target.role == WorkspaceRole.member
    mock_uow.members.update.assert_not_awaited()
