from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from taskflow.api.error import raise_for_error
from taskflow.app.services.password_hasher import PasswordHasher
from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.app.use_cases.access import Identity
from taskflow.app.use_cases.users import (
    ChangePasswordResponse,
    ChangePasswordUseCase,
    GetProfileUseCase,
    UpdateProfileUseCase,
    UserProfileResponse,
)
from taskflow.depends import get_current_user, get_password_hasher, get_unit_of_work

router = APIRouter(prefix="/users", tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserProfileResponse)
async def get_profile(
    current_user: Identity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Profile of the authenticated user with workspace count"""
    result = await GetProfileUseCase(uow).execute(UUID(current_user.id))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateProfileRequest(BaseModel):
    """Update profile HTTP request payload"""

    name: Optional[str] = Field(None, min_length=1, max_length=255, description="Display name")


@router.patch("/me", status_code=status.HTTP_200_OK, response_model=UserProfileResponse)
async def update_profile(
    request: UpdateProfileRequest,
    current_user: Identity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Update the display name"""
    result = await UpdateProfileUseCase(uow).execute(UUID(current_user.id), request.name)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ChangePasswordRequest(BaseModel):
    """Change password HTTP request payload"""

    current_password: str = Field(..., min_length=1, description="Current password")
    new_password: str = Field(..., min_length=8, max_length=128, description="New password")


@router.post("/me/password", status_code=status.HTTP_200_OK, response_model=ChangePasswordResponse)
async def change_password(
    request: ChangePasswordRequest,
    current_user: Identity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Change Password

    Revokes every refresh token of the user, ending all other sessions.

    Raises:
        - 401 Unauthorized: Current password is incorrect
        - 404 Not Found: Account no longer exists
    """
    result = await ChangePasswordUseCase(uow, hasher).execute(
        UUID(current_user.id), request.current_password, request.new_password
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
