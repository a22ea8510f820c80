import logging

from taskflow.app.repositories.errors import StoreError
from taskflow.app.services.password_hasher import PasswordHasher
from taskflow.app.services.token_service import TokenService
from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.domain.entities import User
from taskflow.libs.result import Error, ErrorKind, Result, Return

from .dtos import AuthResponse, RegisterCommand, UserInfo

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Reject an email that is already registered (CONFLICT)
    2. Hash password with bcrypt cost factor 12
    3. Create User and initial refresh token in one transaction
    4. Sign the access token after commit
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, tokens: TokenService):
        self.uow = uow
        self.hasher = hasher
        self.tokens = tokens

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated email, password, optional name

        Returns:
            Result[AuthResponse] with user, access token and refresh token,
            or Error(EMAIL_ALREADY_EXISTS) if the email is taken
        """
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error(
                        "EMAIL_ALREADY_EXISTS",
                        "User with this email already exists",
                        ErrorKind.conflict,
                    )
                )

            password_hash = self.hasher.hash(command.password)
            refresh_token = self.tokens.generate_refresh_secret()

            try:
                user = await self.uow.users.create(
                    User(email=command.email, password_hash=password_hash, name=command.name)
                )
                await self.uow.refresh_tokens.create(user.id, refresh_token)
            except StoreError as exc:
                # A concurrent registration of the same email loses here
                return Return.err(exc.error)

            # User and refresh token become visible together
            await self.uow.commit()

            logger.info(f"User registered: {user.id}")

            access_token = self.tokens.sign_access_token(user.id, user.email)

            return Return.ok(
                AuthResponse(
                    user=UserInfo.from_user(user),
                    access_token=access_token,
                    refresh_token=refresh_token,  # Plain token (only the client holds it)
                )
            )
