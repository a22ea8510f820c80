from uuid import uuid4

import pytest

from taskflow.app.use_cases.workspaces import InviteMemberUseCase
from taskflow.domain.entities import User, WorkspaceMember, WorkspaceRole
from taskflow.libs.result import ErrorKind


@pytest.fixture
def workspace_id():
    return uuid4()


@pytest.fixture
def bob():
    return User(email="bob@example.com", password_hash="x" * 60, name="Bob")


@pytest.mark.asyncio
async def test_admin_invites_existing_user(mock_uow, workspace_id, bob):
    admin = WorkspaceMember(workspace_id=workspace_id, user_id=uuid4(), role=WorkspaceRole.admin)
    mock_uow.members.get_by_workspace_and_user.side_effect = [admin, None]
    mock_uow.users.get_by_email.return_value = bob

    result = await InviteMemberUseCase(mock_uow).execute(
        admin.user_id, workspace_id, "bob@example.com", WorkspaceRole.member
    )

    assert result.is_ok()
    assert result.value.user_id == str(bob.id)
    assert result.value.role == WorkspaceRole.member
    created = mock_uow.members.create.call_args.args[0]
    assert created.workspace_id == workspace_id
    assert created.user_id == bob.id
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_existing_member_is_conflict(mock_uow, workspace_id, bob):
    admin = WorkspaceMember(workspace_id=workspace_id, user_id=uuid4(), role=WorkspaceRole.admin)
    existing = WorkspaceMember(workspace_id=workspace_id, user_id=bob.id, role=WorkspaceRole.member)
    mock_uow.members.get_by_workspace_and_user.side_effect = [admin, existing]
    mock_uow.users.get_by_email.return_value = bob

    result = await InviteMemberUseCase(mock_uow).execute(
        admin.user_id, workspace_id, "bob@example.com", WorkspaceRole.member
    )

    assert result.error.kind == ErrorKind.conflict
    mock_uow.members.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_invitee_is_not_found(mock_uow, workspace_id):
    admin = WorkspaceMember(workspace_id=workspace_id, user_id=uuid4(), role=WorkspaceRole.admin)
    mock_uow.members.get_by_workspace_and_user.side_effect = [admin]

    result = await InviteMemberUseCase(mock_uow).execute(
        admin.user_id, workspace_id, "ghost@example.com", WorkspaceRole.member
    )

    assert result.error.kind == ErrorKind.not_found


@pytest.mark.asyncio
async def test_member_cannot_invite(mock_uow, workspace_id):
    requester = WorkspaceMember(
        workspace_id=workspace_id, user_id=uuid4(), role=WorkspaceRole.member
    )
    mock_uow.members.get_by_workspace_and_user.side_effect = [requester]

    result = await InviteMemberUseCase(mock_uow).execute(
        requester.user_id, workspace_id, "bob@example.com", WorkspaceRole.member
    )

    assert result.error.code == "INSUFFICIENT_ROLE"
    mock_uow.users.get_by_email.assert_not_awaited()
