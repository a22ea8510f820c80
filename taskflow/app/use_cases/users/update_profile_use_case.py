from typing import Optional
from uuid import UUID

from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.libs.result import Result, Return

from .dtos import UserProfileResponse
from .get_profile_use_case import USER_NOT_FOUND, build_profile


class UpdateProfileUseCase:
    """Updates the user's display name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, name: Optional[str]) -> Result[UserProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(USER_NOT_FOUND)

            user.name = name
            user = await self.uow.users.update(user)
            profile = await build_profile(self.uow, user)

            await self.uow.commit()

            return Return.ok(profile)
