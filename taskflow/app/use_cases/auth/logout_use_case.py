from taskflow.app.services.token_service import TokenService
from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.libs.result import Result, Return

from .dtos import LogoutResponse


class LogoutUseCase:
    """
    Revokes the presented refresh token.

    Succeeds even when the token is unknown, expired or already revoked:
    afterwards the token is unusable either way.
    """

    def __init__(self, uow: UnitOfWork, tokens: TokenService):
        self.uow = uow
        self.tokens = tokens

    async def execute(self, refresh_token: str) -> Result[LogoutResponse]:
        async with self.uow:
            await self.uow.refresh_tokens.revoke(self.tokens.hash_refresh_secret(refresh_token))
            await self.uow.commit()

        return Return.ok(LogoutResponse(message="Logged out successfully"))
