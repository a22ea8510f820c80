from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from taskflow.domain.entities import RefreshToken


class IRefreshTokenRepository(ABC):
    """
    Refresh token store interface - application layer.

    Tokens move ACTIVE -> EXPIRED (time) or ACTIVE -> REVOKED (explicit);
    both terminal states look the same to callers.
    """

    @abstractmethod
    async def create(self, user_id: UUID, secret: str) -> RefreshToken:
        """
        Hash the secret and persist a token expiring after the configured TTL.

        Raises StoreError(NOT_FOUND) if the user does not exist and
        StoreError(CONFLICT) on a token hash collision.
        """
        pass

    @abstractmethod
    async def find(self, token_hash: str) -> Optional[RefreshToken]:
        """
        Get an active token by hash.

        Returns None for unknown, expired or revoked tokens, and for
        connectivity failures (fail closed).
        """
        pass

    @abstractmethod
    async def revoke(self, token_hash: str) -> bool:
        """Revoke a token. Idempotent. Returns True if an active token was revoked."""
        pass

    @abstractmethod
    async def revoke_all(self, user_id: UUID) -> int:
        """Revoke every active token of a user. Returns count of revoked tokens."""
        pass

    @abstractmethod
    async def rotate(self, old_hash: str, new_secret: str, user_id: UUID) -> RefreshToken:
        """
        Revoke the old token and create its successor in the current transaction.

        Raises StoreError(UNAUTHORIZED) if the old token is no longer active,
        e.g. because a concurrent rotation already spent it.
        """
        pass
