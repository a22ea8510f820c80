"""
Token Service

Signs and verifies JWT access tokens and issues opaque refresh secrets.
"""

import hashlib
import logging
import re
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from jose import JWTError, jwt

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
MIN_SECRET_LENGTH = 32
TEST_JWT_SECRET = "test-secret-key-for-testing-purposes-only-min-32-chars"

DEFAULT_ACCESS_TOKEN_TTL = timedelta(hours=1)
DEFAULT_REFRESH_TOKEN_TTL = timedelta(days=30)

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([hd])\s*$")


class ConfigurationError(Exception):
    """Raised at startup when required configuration is missing or invalid"""


@dataclass(frozen=True)
class AccessTokenClaims:
    user_id: str
    email: str


def parse_duration(value: Optional[str], default: timedelta) -> timedelta:
    """
    Parse a TTL string such as "1h" or "30d".

    Only the h (hours) and d (days) suffixes are recognized; anything else
    falls back to ``default``.
    """
    if not value:
        return default
    match = _DURATION_RE.match(str(value))
    if match is None:
        return default
    amount, unit = int(match.group(1)), match.group(2)
    if unit == "h":
        return timedelta(hours=amount)
    return timedelta(days=amount)


def generate_refresh_secret() -> str:
    """256 bits from the OS CSPRNG, hex encoded. Not a JWT."""
    return secrets.token_hex(32)


def hash_refresh_secret(secret: str) -> str:
    """Deterministic SHA-256 hex digest, used to store and look up refresh tokens."""
    return hashlib.sha256(secret.encode("utf-8")).hexdigest()


class TokenService:
    """
    Access/refresh token codec.

    Built once at startup (see ``from_config``) and shared through app.state.
    """

    def __init__(
        self,
        secret: str,
        access_token_ttl: timedelta = DEFAULT_ACCESS_TOKEN_TTL,
        refresh_token_ttl: timedelta = DEFAULT_REFRESH_TOKEN_TTL,
    ):
        if not secret or len(secret) < MIN_SECRET_LENGTH:
            raise ConfigurationError(
                f"JWT_SECRET must be set and at least {MIN_SECRET_LENGTH} characters long"
            )
        self._secret = secret
        self.access_token_ttl = access_token_ttl
        self.refresh_token_ttl = refresh_token_ttl

    @classmethod
    def from_config(cls, config) -> "TokenService":
        """
        Build the service from ApplicationConfig.

        Raises:
            ConfigurationError: secret missing or too short outside test mode
        """
        secret = getattr(config, "JWT_SECRET", None)
        if getattr(config, "ENVIRONMENT", "development") == "test" and not secret:
            secret = TEST_JWT_SECRET
        return cls(
            secret=secret,
            access_token_ttl=parse_duration(
                getattr(config, "JWT_ACCESS_TOKEN_EXPIRY", None), DEFAULT_ACCESS_TOKEN_TTL
            ),
            refresh_token_ttl=parse_duration(
                getattr(config, "JWT_REFRESH_TOKEN_EXPIRY", None), DEFAULT_REFRESH_TOKEN_TTL
            ),
        )

    def sign_access_token(self, user_id: UUID, email: str) -> str:
        """
        Sign a JWT access token

        Args:
            user_id: User UUID
            email: User email

        Returns:
            JWT token string (HS256, expiry from JWT_ACCESS_TOKEN_EXPIRY)
        """
        now = datetime.now(UTC)
        payload = {
            "user_id": str(user_id),
            "email": email,
            "jti": uuid4().hex,
            "iat": now,
            "exp": now + self.access_token_ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def verify_access_token(self, token: str) -> Optional[AccessTokenClaims]:
        """
        Verify and decode a JWT access token

        Returns:
            Claims, or None if the signature, expiry or payload is invalid
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[JWT_ALGORITHM])
        except JWTError:
            return None
        except Exception:
            logger.warning("Unexpected error while decoding access token", exc_info=True)
            return None

        user_id = payload.get("user_id")
        email = payload.get("email")
        if not isinstance(user_id, str) or not isinstance(email, str):
            return None
        return AccessTokenClaims(user_id=user_id, email=email)

    generate_refresh_secret = staticmethod(generate_refresh_secret)
    hash_refresh_secret = staticmethod(hash_refresh_secret)
