"""
Authorize Workspace Use Case

Role-hierarchy gate for workspace-scoped operations.
"""

from typing import Optional
from uuid import UUID

from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.domain.entities import WorkspaceMember, WorkspaceRole, has_min_role
from taskflow.libs.result import Error, ErrorKind, Result, Return

from .dtos import WorkspaceAccess

NOT_A_MEMBER = Error(
    "NOT_A_MEMBER", "Forbidden: You are not a member of this workspace", ErrorKind.forbidden
)


def insufficient_role(min_role: WorkspaceRole, role: WorkspaceRole) -> Error:
    return Error(
        "INSUFFICIENT_ROLE",
        f"Forbidden: Insufficient role. Required: {WorkspaceRole(min_role).value}, "
        f"Current: {WorkspaceRole(role).value}",
        ErrorKind.forbidden,
    )


async def check_workspace_role(
    uow: UnitOfWork,
    workspace_id: Optional[UUID],
    user_id: Optional[UUID],
    min_role: WorkspaceRole,
) -> Result[WorkspaceMember]:
    """
    Load the caller's membership and compare role ranks.

    Must be awaited inside an open ``async with uow`` block.
    """
    membership = await uow.members.get_by_workspace_and_user(workspace_id, user_id)
    if membership is None:
        return Return.err(NOT_A_MEMBER)

    if not has_min_role(membership.role, min_role):
        return Return.err(insufficient_role(min_role, membership.role))

    return Return.ok(membership)


class AuthorizeWorkspaceUseCase:
    """
    Use case for workspace role checks.

    Business Rules:
    - No membership -> FORBIDDEN (not a member)
    - Role rank below the required minimum -> FORBIDDEN naming both roles
    - OWNER(3) > ADMIN(2) > MEMBER(1); higher roles satisfy lower requirements
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, workspace_id: UUID, min_role: WorkspaceRole
    ) -> Result[WorkspaceAccess]:
        async with self.uow:
            result = await check_workspace_role(self.uow, workspace_id, user_id, min_role)
            if result.is_err():
                return Return.err(result.error)

            membership = result.value
            return Return.ok(
                WorkspaceAccess(
                    workspace_id=str(membership.workspace_id),
                    user_id=str(membership.user_id),
                    role=membership.role,
                )
            )
