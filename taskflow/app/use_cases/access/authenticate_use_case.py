"""
Authenticate Use Case

Turns an Authorization header into an Identity.
"""

from typing import Optional
from uuid import UUID

from taskflow.app.services.token_service import TokenService
from taskflow.libs.result import Error, ErrorKind, Result, Return

from .dtos import Identity

MISSING_AUTHORIZATION = Error(
    "MISSING_AUTHORIZATION", "Missing or invalid authorization header", ErrorKind.unauthorized
)
INVALID_TOKEN = Error("INVALID_TOKEN", "Invalid or expired token", ErrorKind.unauthorized)


def parse_bearer(authorization: Optional[str]) -> Optional[str]:
    """Return the token of a ``Bearer <token>`` header, or None if malformed"""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


class AuthenticateUseCase:
    """
    Verifies a bearer access token.

    Purely signature and expiry based; no database access. A token stays
    valid until it expires, even after logout or a password change.
    """

    def __init__(self, tokens: TokenService):
        self.tokens = tokens

    def execute(self, authorization: Optional[str]) -> Result[Identity]:
        token = parse_bearer(authorization)
        if token is None:
            return Return.err(MISSING_AUTHORIZATION)

        claims = self.tokens.verify_access_token(token)
        if claims is None:
            return Return.err(INVALID_TOKEN)

        try:
            UUID(claims.user_id)
        except ValueError:
            return Return.err(INVALID_TOKEN)

        return Return.ok(Identity(id=claims.user_id, email=claims.email))
