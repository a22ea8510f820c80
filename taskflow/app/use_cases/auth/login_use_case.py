"""
Login Use Case

Handles password authentication and issues a new token pair.
"""

from taskflow.app.repositories.errors import StoreError
from taskflow.app.services.password_hasher import PasswordHasher
from taskflow.app.services.token_service import TokenService
from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.libs.result import Error, ErrorKind, Result, Return

from .dtos import AuthResponse, UserInfo

INVALID_CREDENTIALS = Error(
    "INVALID_CREDENTIALS", "Invalid email or password", ErrorKind.unauthorized
)


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Unknown email and wrong password fail with the same error
    - Constant-time password comparison, and a dummy hash check for unknown
      emails so response time does not reveal which case happened
    - Every login creates a new refresh token; concurrent sessions are allowed
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, tokens: TokenService):
        self.uow = uow
        self.hasher = hasher
        self.tokens = tokens

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse, or Error(INVALID_CREDENTIALS)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                self.hasher.burn_time()
                return Return.err(INVALID_CREDENTIALS)

            if not self.hasher.verify(password, user.password_hash):
                return Return.err(INVALID_CREDENTIALS)

            refresh_token = self.tokens.generate_refresh_secret()
            try:
                await self.uow.refresh_tokens.create(user.id, refresh_token)
            except StoreError as exc:
                return Return.err(exc.error)

            await self.uow.commit()

            access_token = self.tokens.sign_access_token(user.id, user.email)

            return Return.ok(
                AuthResponse(
                    user=UserInfo.from_user(user),
                    access_token=access_token,
                    refresh_token=refresh_token,
                )
            )
