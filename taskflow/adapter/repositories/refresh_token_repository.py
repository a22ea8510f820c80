import logging
from datetime import timedelta
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from taskflow.adapter.repositories.integrity import (
    CONNECTIVITY_ERRORS,
    is_foreign_key_violation,
    is_unique_violation,
)
from taskflow.app.repositories.errors import StoreError
from taskflow.app.repositories.refresh_token_repository import IRefreshTokenRepository
from taskflow.app.services.token_service import DEFAULT_REFRESH_TOKEN_TTL, hash_refresh_secret
from taskflow.domain.base import utcnow
from taskflow.domain.entities import RefreshToken
from taskflow.libs.result import Error, ErrorKind

logger = logging.getLogger(__name__)


class RefreshTokenRepository(IRefreshTokenRepository):
    """Refresh token repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession, ttl: timedelta = DEFAULT_REFRESH_TOKEN_TTL):
        self.session = session
        self.ttl = ttl

    async def create(self, user_id: UUID, secret: str) -> RefreshToken:
        """Create a new refresh token for a user"""
        token = RefreshToken(
            user_id=user_id,
            token_hash=hash_refresh_secret(secret),
            expires_at=utcnow() + self.ttl,
        )
        self.session.add(token)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            if is_foreign_key_violation(exc):
                raise StoreError(
                    Error("USER_NOT_FOUND", "User not found", ErrorKind.not_found)
                ) from exc
            if is_unique_violation(exc):
                raise StoreError(
                    Error(
                        "TOKEN_HASH_COLLISION",
                        "Refresh token hash already exists",
                        ErrorKind.conflict,
                    )
                ) from exc
            raise
        await self.session.refresh(token)
        return token

    async def find(self, token_hash: str) -> Optional[RefreshToken]:
        """Get an active (not revoked, not expired) token by hash"""
        stmt = select(RefreshToken).where(
            RefreshToken.token_hash == token_hash,
            RefreshToken.revoked_at.is_(None),
            RefreshToken.expires_at > utcnow(),
        )
        try:
            result = await self.session.exec(stmt)
        except CONNECTIVITY_ERRORS:
            logger.warning("Refresh token lookup failed, treating token as invalid", exc_info=True)
            return None
        return result.one_or_none()

    async def revoke(self, token_hash: str) -> bool:
        """Revoke a token if it is still unrevoked"""
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.token_hash == token_hash, RefreshToken.revoked_at.is_(None))
            .values(revoked_at=utcnow())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def revoke_all(self, user_id: UUID) -> int:
        """Revoke all active tokens of a user"""
        now = utcnow()
        stmt = (
            update(RefreshToken)
            .where(
                RefreshToken.user_id == user_id,
                RefreshToken.revoked_at.is_(None),
                RefreshToken.expires_at > now,
            )
            .values(revoked_at=now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def rotate(self, old_hash: str, new_secret: str, user_id: UUID) -> RefreshToken:
        """
        Spend the old token and issue its successor.

        The revoke is a compare-and-set on the active row: of two concurrent
        rotations of the same token, only one UPDATE matches, the other sees
        zero rows and fails. Commit/rollback of both halves is the caller's
        unit of work.
        """
        now = utcnow()
        stmt = (
            update(RefreshToken)
            .where(
                RefreshToken.token_hash == old_hash,
                RefreshToken.user_id == user_id,
                RefreshToken.revoked_at.is_(None),
                RefreshToken.expires_at > now,
            )
            .values(revoked_at=now)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            raise StoreError(
                Error(
                    "INVALID_REFRESH_TOKEN",
                    "Invalid or expired refresh token",
                    ErrorKind.unauthorized,
                )
            )
        return await self.create(user_id, new_secret)
