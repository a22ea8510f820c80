from typing import Optional
from uuid import UUID

from fastapi import Depends, Header, Request, status

from taskflow.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from taskflow.api.error import ClientError, raise_for_error
from taskflow.app.services.background import BackgroundDispatcher
from taskflow.app.services.password_hasher import PasswordHasher
from taskflow.app.services.search_indexer import ISearchIndexer
from taskflow.app.services.token_service import TokenService
from taskflow.app.use_cases.access import (
    AuthenticateUseCase,
    AuthorizeWorkspaceUseCase,
    Identity,
    WorkspaceAccess,
)
from taskflow.domain.entities import WorkspaceRole
from taskflow.libs.result import Error, ErrorKind

# Services are built once in create_app and live on app.state


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_dispatcher(request: Request) -> BackgroundDispatcher:
    return request.app.state.dispatcher


def get_search_indexer(request: Request) -> ISearchIndexer:
    return request.app.state.search_indexer


async def get_unit_of_work(request: Request):
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise ClientError(
            Error("SERVICE_UNAVAILABLE", "Database is not initialized", ErrorKind.unavailable),
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    async with session_factory() as session:
        yield SqlAlchemyUnitOfWork(session, request.app.state.token_service.refresh_token_ttl)


async def get_current_user(
    authorization: Optional[str] = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    """
    Dependency to extract and verify the access token from the Authorization header.

    Returns:
        Identity with the user's id and email

    Raises:
        ClientError: 401 if the header is missing/malformed or the token is invalid or expired
    """
    result = AuthenticateUseCase(tokens).execute(authorization)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


def parse_uuid(value: str, code: str, message: str) -> UUID:
    try:
        return UUID(value)
    except (ValueError, TypeError):
        raise ClientError(
            Error(code, message, ErrorKind.validation),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def require_workspace_role(min_role: WorkspaceRole):
    """
    Dependency factory gating a ``/{workspace_id}`` route on a minimum role.

    Usage:
        access: WorkspaceAccess = Depends(require_workspace_role(WorkspaceRole.admin))
    """

    async def dependency(
        workspace_id: str,
        current_user: Identity = Depends(get_current_user),
        uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
    ) -> WorkspaceAccess:
        workspace_uuid = parse_uuid(workspace_id, "INVALID_WORKSPACE_ID", "Invalid workspace ID")
        result = await AuthorizeWorkspaceUseCase(uow).execute(
            UUID(current_user.id), workspace_uuid, min_role
        )
        if result.is_err():
            raise_for_error(result.error)
        return result.value

    return dependency
