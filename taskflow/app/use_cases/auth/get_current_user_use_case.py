from uuid import UUID

from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.libs.result import Error, ErrorKind, Result, Return

from .dtos import UserInfo


class GetCurrentUserUseCase:
    """Loads the account behind an authenticated access token"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found", ErrorKind.not_found))
            return Return.ok(UserInfo.from_user(user))
