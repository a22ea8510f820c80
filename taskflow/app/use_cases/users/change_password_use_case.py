"""
Change Password Use Case

Replaces the password hash and ends every outstanding session.
"""

import logging
from uuid import UUID

from taskflow.app.services.password_hasher import PasswordHasher
from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.libs.result import Error, ErrorKind, Result, Return

from .dtos import ChangePasswordResponse
from .get_profile_use_case import USER_NOT_FOUND

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """
    Use case for changing the authenticated user's password.

    Business Rules:
    - Current password must verify (UNAUTHORIZED otherwise)
    - New hash and revocation of all refresh tokens commit together
    - Outstanding access tokens stay valid until they expire
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(
        self, user_id: UUID, current_password: str, new_password: str
    ) -> Result[ChangePasswordResponse]:
        """
        Execute change password use case.

        Args:
            user_id: Authenticated user ID
            current_password: Password the user claims to have
            new_password: Replacement password

        Returns:
            Result with ChangePasswordResponse, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(USER_NOT_FOUND)

            if not self.hasher.verify(current_password, user.password_hash):
                return Return.err(
                    Error(
                        "INVALID_CURRENT_PASSWORD",
                        "Current password is incorrect",
                        ErrorKind.unauthorized,
                    )
                )

            user.password_hash = self.hasher.hash(new_password)
            await self.uow.users.update(user)
            revoked = await self.uow.refresh_tokens.revoke_all(user.id)

            await self.uow.commit()

            logger.info(f"Password changed for user {user.id}, {revoked} sessions revoked")

            return Return.ok(
                ChangePasswordResponse(
                    message="Password changed successfully", revoked_sessions=revoked
                )
            )
