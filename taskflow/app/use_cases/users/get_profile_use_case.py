from uuid import UUID

from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.domain.entities import User
from taskflow.libs.result import Error, ErrorKind, Result, Return

from .dtos import UserProfileResponse

USER_NOT_FOUND = Error("USER_NOT_FOUND", "User not found", ErrorKind.not_found)


async def build_profile(uow: UnitOfWork, user: User) -> UserProfileResponse:
    workspace_count = await uow.members.count_by_user(user.id)
    return UserProfileResponse(
        id=str(user.id),
        email=user.email,
        name=user.name,
        created_at=user.created_at,
        updated_at=user.updated_at,
        workspace_count=workspace_count,
    )


class GetProfileUseCase:
    """Returns the user's profile with the number of workspaces they belong to"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(USER_NOT_FOUND)
            return Return.ok(await build_profile(self.uow, user))
