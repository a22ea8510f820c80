import pytest
from unittest.mock import AsyncMock, MagicMock

from taskflow.app.services.password_hasher import PasswordHasher
from taskflow.app.services.token_service import TEST_JWT_SECRET, TokenService


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.refresh_tokens = MagicMock()
    uow.refresh_tokens.create = AsyncMock()
    uow.refresh_tokens.find = AsyncMock(return_value=None)
    uow.refresh_tokens.revoke = AsyncMock(return_value=True)
    uow.refresh_tokens.revoke_all = AsyncMock(return_value=0)
    uow.refresh_tokens.rotate = AsyncMock()

    uow.workspaces = MagicMock()
    uow.workspaces.get_by_id = AsyncMock(return_value=None)
    uow.workspaces.create = AsyncMock(side_effect=lambda workspace: workspace)
    uow.workspaces.update = AsyncMock(side_effect=lambda workspace: workspace)
    uow.workspaces.list_for_user = AsyncMock(return_value=[])

    uow.members = MagicMock()
    uow.members.get_by_workspace_and_user = AsyncMock(return_value=None)
    uow.members.list_by_workspace = AsyncMock(return_value=[])
    uow.members.count_by_user = AsyncMock(return_value=0)
    uow.members.count_owners_for_update = AsyncMock(return_value=1)
    uow.members.create = AsyncMock(side_effect=lambda membership: membership)
    uow.members.update = AsyncMock(side_effect=lambda membership: membership)
    uow.members.delete = AsyncMock()

    return uow


@pytest.fixture
def hasher():
    # Minimum cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens():
    return TokenService(TEST_JWT_SECRET)
