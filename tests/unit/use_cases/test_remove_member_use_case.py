from uuid import uuid4

import pytest

from taskflow.app.use_cases.workspaces import RemoveMemberUseCase
from taskflow.domain.entities import WorkspaceMember, WorkspaceRole
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
async def test_admin_removes_member(mock_uow, workspace_id):
    admin = member(workspace_id, WorkspaceRole.admin)
    target = member(workspace_id, WorkspaceRole.member)
    mock_uow.members.get_by_workspace_and_user.side_effect = lookup(admin, target)

    result = await RemoveMemberUseCase(mock_uow).execute(admin.user_id, workspace_id, target.user_id)

    assert result.is_ok()
    assert result.value.status == "removed"
    mock_uow.members.delete.assert_awaited_once_with(target)
    mock_uow.commit.assert_awaited_once()
    mock_uow.members.count_owners_for_update.assert_not_awaited()


@pytest.mark.asyncio
async def test_sole_owner_cannot_remove_themselves(mock_uow, workspace_id):
    owner = member(workspace_id, WorkspaceRole.owner)
    mock_uow.members.get_by_workspace_and_user.side_effect = lookup(owner)
    mock_uow.members.count_owners_for_update.return_value = 1

    result = await RemoveMemberUseCase(mock_uow).execute(owner.user_id, workspace_id, owner.user_id)

    assert result.error.code == "CANNOT_REMOVE_LAST_OWNER"
    assert result.error.kind == ErrorKind.validation
    assert result.error.message == "Cannot remove the last OWNER"
    mock_uow.members.delete.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_owner_removes_one_of_two_owners(mock_uow, workspace_id):
    owner = member(workspace_id, WorkspaceRole.owner)
    co_owner = member(workspace_id, WorkspaceRole.owner)
    mock_uow.members.get_by_workspace_and_user.side_effect = lookup(owner, co_owner)
    mock_uow.members.count_owners_for_update.return_value = 2

    result = await RemoveMemberUseCase(mock_uow).execute(
        owner.user_id, workspace_id, co_owner.user_id
    )

    assert result.is_ok()
    mock_uow.members.count_owners_for_update.assert_awaited_once_with(workspace_id)
    mock_uow.members.delete.assert_awaited_once_with(co_owner)


@pytest.mark.asyncio
async def test_admin_cannot_remove_an_owner(mock_uow, workspace_id):
    admin = member(workspace_id, WorkspaceRole.admin)
    owner = member(workspace_id, WorkspaceRole.owner)
    mock_uow.members.get_by_workspace_and_user.side_effect = lookup(admin, owner)
    mock_uow.members.count_owners_for_update.return_value = 2

    result = await RemoveMemberUseCase(mock_uow).execute(admin.user_id, workspace_id, owner.user_id)

    assert result.error.kind == ErrorKind.forbidden
    mock_uow.members.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_member_cannot_remove_anyone(mock_uow, workspace_id):
    requester = member(workspace_id, WorkspaceRole.member)
    target = member(workspace_id, WorkspaceRole.member)
    mock_uow.members.get_by_workspace_and_user.side_effect = lookup(requester, target)

    result = await RemoveMemberUseCase(mock_uow).execute(
        requester.user_id, workspace_id, target.user_id
    )

    assert result.error.code == "INSUFFICIENT_ROLE"
    mock_uow.members.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_target_is_not_found(mock_uow, workspace_id):
    admin = member(workspace_id, WorkspaceRole.admin)
    mock_uow.members.get_by_workspace_and_user.side_effect = lookup(admin)

    result = await RemoveMemberUseCase(mock_uow).execute(admin.user_id, workspace_id, uuid4())

    assert result.error.code == "MEMBER_NOT_FOUND"
    assert result.error.kind == ErrorKind.not_found


@pytest.mark.asyncio
async def test_owner_cannot_remove_themselves_among_several_owners(mock_uow, workspace_id):
    owner = member(workspace_id, WorkspaceRole.owner)
    co_owner = member(workspace_id, WorkspaceRole.owner)
    mock_uow.members.get_by_workspace_and_user.side_effect = lookup(owner, co_owner)
    mock_uow.members.count_owners_for_update.return_value = 2

    result = await RemoveMemberUseCase(mock_uow).execute(owner.user_id, workspace_id, owner.user_id)

    assert result.error.code == "CANNOT_REMOVE_SELF_AS_OWNER"
    assert result.error.kind == ErrorKind.validation
    assert result.error.message == "Cannot remove yourself as OWNER"
    mock_uow.members.delete.assert_not_awaited()
