from abc import ABC, abstractmethod

from taskflow.app.repositories.refresh_token_repository import IRefreshTokenRepository
from taskflow.app.repositories.user_repository import IUserRepository
from taskflow.app.repositories.workspace_member_repository import IWorkspaceMemberRepository
from taskflow.app.repositories.workspace_repository import IWorkspaceRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    refresh_tokens: IRefreshTokenRepository
    workspaces: IWorkspaceRepository
    members: IWorkspaceMemberRepository

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
