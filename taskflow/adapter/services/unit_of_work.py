from datetime import timedelta

from sqlmodel.ext.asyncio.session import AsyncSession

from taskflow.adapter.repositories.refresh_token_repository import RefreshTokenRepository
from taskflow.adapter.repositories.user_repository import UserRepository
from taskflow.adapter.repositories.workspace_member_repository import WorkspaceMemberRepository
from taskflow.adapter.repositories.workspace_repository import WorkspaceRepository
from taskflow.app.services.token_service import DEFAULT_REFRESH_TOKEN_TTL
from taskflow.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(
        self, session: AsyncSession, refresh_token_ttl: timedelta = DEFAULT_REFRESH_TOKEN_TTL
    ):
        self.session = session
        self.refresh_token_ttl = refresh_token_ttl

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.refresh_tokens = RefreshTokenRepository(self.session, self.refresh_token_ttl)
        self.workspaces = WorkspaceRepository(self.session)
        self.members = WorkspaceMemberRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
