from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from taskflow.api.error import raise_for_error
from taskflow.app.services.password_hasher import PasswordHasher
from taskflow.app.services.token_service import TokenService
from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.app.use_cases.access import Identity
from taskflow.app.use_cases.auth import (
    AuthResponse,
    GetCurrentUserUseCase,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    RefreshTokenResponse,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterUseCase,
    UserInfo,
)
from taskflow.depends import (
    get_current_user,
    get_password_hasher,
    get_token_service,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, max_length=128, description="Password (min 8 chars)")
    name: Optional[str] = Field(None, min_length=1, max_length=255, description="Display name")


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """
    User Registration

    Creates the account and its first session.

    Raises:
        - 400 Bad Request: Invalid input
        - 409 Conflict: Email already registered
    """
    command = RegisterCommand(email=request.email, password=request.password, name=request.name)

    result = await RegisterUseCase(uow, hasher, tokens).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """
    User Login

    Raises:
        - 401 Unauthorized: Invalid email or password (same response for both)
    """
    result = await LoginUseCase(uow, hasher, tokens).execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class RefreshRequest(BaseModel):
    """Refresh token HTTP request payload"""

    refresh_token: str = Field(..., min_length=1, description="Refresh token")


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=RefreshTokenResponse)
async def refresh(
    request: RefreshRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Refresh Access Token

    Rotates the refresh token: the presented token is spent and a new pair is issued.

    Raises:
        - 401 Unauthorized: Invalid, expired, revoked or already rotated token
    """
    result = await RefreshTokenUseCase(uow, tokens).execute(request.refresh_token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LogoutRequest(BaseModel):
    """Logout HTTP request payload"""

    refresh_token: str = Field(..., min_length=1, description="Refresh token to revoke")


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    request: LogoutRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Logout

    Revokes the refresh token. Succeeds for tokens that are already invalid.
    """
    result = await LogoutUseCase(uow, tokens).execute(request.refresh_token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def me(
    current_user: Identity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current User

    Raises:
        - 401 Unauthorized: Missing, invalid or expired access token
        - 404 Not Found: Account no longer exists
    """
    result = await GetCurrentUserUseCase(uow).execute(UUID(current_user.id))

    if result.is_err():
        raise_for_error(result.error)

    return result.value
