"""
Refresh Token Use Case

Handles access token refresh with refresh token rotation.
"""

import logging

from taskflow.app.repositories.errors import StoreError
from taskflow.app.services.token_service import TokenService
from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.libs.result import Error, ErrorKind, Result, Return

from .dtos import RefreshTokenResponse

logger = logging.getLogger(__name__)

INVALID_REFRESH_TOKEN = Error(
    "INVALID_REFRESH_TOKEN", "Invalid or expired refresh token", ErrorKind.unauthorized
)


class RefreshTokenUseCase:
    """
    Use case for refreshing access tokens.

    Business Rules:
    - Refresh token rotation: old token revoked, new token issued, atomically
    - Expired, revoked and unknown tokens fail identically
    - Token owner must still exist
    - Of two concurrent refreshes with the same token, exactly one succeeds
    """

    def __init__(self, uow: UnitOfWork, tokens: TokenService):
        self.uow = uow
        self.tokens = tokens

    async def execute(self, refresh_token: str) -> Result[RefreshTokenResponse]:
        """
        Execute refresh token use case.

        Args:
            refresh_token: The raw refresh secret presented by the client

        Returns:
            Result with RefreshTokenResponse containing the new pair, or Error
        """
        token_hash = self.tokens.hash_refresh_secret(refresh_token)

        async with self.uow:
            record = await self.uow.refresh_tokens.find(token_hash)
            if record is None:
                return Return.err(INVALID_REFRESH_TOKEN)

            user = await self.uow.users.get_by_id(record.user_id)
            if user is None:
                return Return.err(INVALID_REFRESH_TOKEN)

            # A failed flush expires loaded rows; read nothing from `user` past this point
            user_id, email = user.id, user.email

            new_refresh_token = self.tokens.generate_refresh_secret()
            try:
                await self.uow.refresh_tokens.rotate(token_hash, new_refresh_token, user_id)
            except StoreError as exc:
                logger.warning(f"Refresh token rotation rejected for user {user_id}: {exc.error.code}")
                return Return.err(exc.error)

            await self.uow.commit()

            access_token = self.tokens.sign_access_token(user_id, email)

            return Return.ok(
                RefreshTokenResponse(
                    access_token=access_token,
                    refresh_token=new_refresh_token,
                )
            )
