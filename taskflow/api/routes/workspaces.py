from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from taskflow.api.error import raise_for_error
from taskflow.app.services.background import BackgroundDispatcher
from taskflow.app.services.search_indexer import ISearchIndexer
from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.app.use_cases.access import Identity, WorkspaceAccess
from taskflow.app.use_cases.workspaces import (
    CreateWorkspaceUseCase,
    GetWorkspaceUseCase,
    InviteMemberUseCase,
    ListMembersUseCase,
    ListWorkspacesUseCase,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    UpdateMemberRoleUseCase,
    UpdateWorkspaceUseCase,
    WorkspaceMemberResponse,
    WorkspaceResponse,
)
from taskflow.depends import (
    get_current_user,
    get_dispatcher,
    get_search_indexer,
    get_unit_of_work,
    parse_uuid,
    require_workspace_role,
)
from taskflow.domain.entities import WorkspaceRole

router = APIRouter(prefix="/workspaces", tags=["Workspace"])

require_member = require_workspace_role(WorkspaceRole.member)
require_admin = require_workspace_role(WorkspaceRole.admin)
require_owner = require_workspace_role(WorkspaceRole.owner)


def schedule_index_sync(
    dispatcher: BackgroundDispatcher, indexer: ISearchIndexer, workspace_id: UUID
) -> None:
    """Membership changed: resync search access without waiting for it"""
    dispatcher.submit(
        f"search-index-sync:{workspace_id}",
        lambda: indexer.sync_workspace(workspace_id),
    )


class WorkspaceRequest(BaseModel):
    """Create/update workspace HTTP request payload"""

    name: str = Field(..., min_length=1, max_length=100, description="Workspace name")


class InviteMemberRequest(BaseModel):
    """Invite member HTTP request payload"""

    email: EmailStr = Field(..., description="Email of an existing user")
    role: WorkspaceRole = Field(..., description="OWNER, ADMIN or MEMBER")


class UpdateMemberRoleRequest(BaseModel):
    """Update member role HTTP request payload"""

    role: WorkspaceRole = Field(..., description="OWNER, ADMIN or MEMBER")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=WorkspaceResponse)
async def create_workspace(
    request: WorkspaceRequest,
    current_user: Identity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Create a workspace; the caller becomes its OWNER"""
    result = await CreateWorkspaceUseCase(uow).execute(UUID(current_user.id), request.name)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[WorkspaceResponse])
async def list_workspaces(
    current_user: Identity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Workspaces the caller belongs to"""
    result = await ListWorkspacesUseCase(uow).execute(UUID(current_user.id))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{workspace_id}", status_code=status.HTTP_200_OK, response_model=WorkspaceResponse)
async def get_workspace(
    access: WorkspaceAccess = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Workspace details (MEMBER)

    Raises:
        - 401 Unauthorized: Missing or invalid access token
        - 403 Forbidden: Not a member
    """
    result = await GetWorkspaceUseCase(uow).execute(
        UUID(access.user_id), UUID(access.workspace_id)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch("/{workspace_id}", status_code=status.HTTP_200_OK, response_model=WorkspaceResponse)
async def update_workspace(
    request: WorkspaceRequest,
    access: WorkspaceAccess = Depends(require_owner),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Rename a workspace (OWNER)"""
    result = await UpdateWorkspaceUseCase(uow).execute(
        UUID(access.user_id), UUID(access.workspace_id), request.name
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{workspace_id}/members",
    status_code=status.HTTP_200_OK,
    response_model=List[WorkspaceMemberResponse],
)
async def list_members(
    access: WorkspaceAccess = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Members of a workspace (MEMBER)"""
    result = await ListMembersUseCase(uow).execute(UUID(access.user_id), UUID(access.workspace_id))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{workspace_id}/members",
    status_code=status.HTTP_201_CREATED,
    response_model=WorkspaceMemberResponse,
)
async def invite_member(
    request: InviteMemberRequest,
    access: WorkspaceAccess = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    dispatcher: BackgroundDispatcher = Depends(get_dispatcher),
    indexer: ISearchIndexer = Depends(get_search_indexer),
):
    """
    Add an existing user to the workspace (ADMIN)

    Raises:
        - 403 Forbidden: Not an admin, or a non-owner granting OWNER
        - 404 Not Found: No user with that email
        - 409 Conflict: Already a member
    """
    workspace_id = UUID(access.workspace_id)
    result = await InviteMemberUseCase(uow).execute(
        UUID(access.user_id), workspace_id, request.email, request.role
    )

    if result.is_err():
        raise_for_error(result.error)

    schedule_index_sync(dispatcher, indexer, workspace_id)
    return result.value


@router.patch(
    "/{workspace_id}/members/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=WorkspaceMemberResponse,
)
async def update_member_role(
    user_id: str,
    request: UpdateMemberRoleRequest,
    access: WorkspaceAccess = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    dispatcher: BackgroundDispatcher = Depends(get_dispatcher),
    indexer: ISearchIndexer = Depends(get_search_indexer),
):
    """
    Change a member's role (ADMIN)

    Raises:
        - 400 Bad Request: Downgrading the last OWNER
        - 403 Forbidden: Not an admin, or a non-owner touching the OWNER role
        - 404 Not Found: Member not found
    """
    target_user_id = parse_uuid(user_id, "INVALID_USER_ID", "Invalid user ID")
    workspace_id = UUID(access.workspace_id)

    result = await UpdateMemberRoleUseCase(uow).execute(
        UUID(access.user_id), workspace_id, target_user_id, request.role
    )

    if result.is_err():
        raise_for_error(result.error)

    schedule_index_sync(dispatcher, indexer, workspace_id)
    return result.value


@router.delete(
    "/{workspace_id}/members/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveMemberResponse,
)
async def remove_member(
    user_id: str,
    access: WorkspaceAccess = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    dispatcher: BackgroundDispatcher = Depends(get_dispatcher),
    indexer: ISearchIndexer = Depends(get_search_indexer),
):
    """
    Remove a member (ADMIN)

    Raises:
        - 400 Bad Request: Removing the last OWNER
        - 403 Forbidden: Not an admin, or a non-owner removing an OWNER
        - 404 Not Found: Member not found
    """
    target_user_id = parse_uuid(user_id, "INVALID_USER_ID", "Invalid user ID")
    workspace_id = UUID(access.workspace_id)

    result = await RemoveMemberUseCase(uow).execute(
        UUID(access.user_id), workspace_id, target_user_id
    )

    if result.is_err():
        raise_for_error(result.error)

    schedule_index_sync(dispatcher, indexer, workspace_id)
    return result.value
