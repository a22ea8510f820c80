"""
Refresh Token Entity

Server-side record of an opaque refresh secret.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from taskflow.domain.base import utcnow


class RefreshToken(SQLModel, table=True):
    """
    RefreshToken entity - one continuation credential for a user.

    Business Rules:
    - Only the SHA-256 hex digest of the secret is stored
    - token_hash is unique across all tokens
    - Usable iff revoked_at IS NULL and expires_at > now
    - Rotated on every refresh, revoked on logout and password change
    - Never deleted; lookups filter on validity
    """

    __tablename__ = "refresh_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    token_hash: str = Field(unique=True, index=True, max_length=64)  # SHA-256 hex
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )

    __table_args__ = (Index("idx_refresh_token_user_revoked", "user_id", "revoked_at"),)
