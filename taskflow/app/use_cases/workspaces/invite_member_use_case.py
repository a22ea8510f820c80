"""
Invite Member Use Case

Adds an existing user to a workspace with a role.
"""

from uuid import UUID

from taskflow.app.repositories.errors import StoreError
from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.app.use_cases.access import check_workspace_role
from taskflow.domain.entities import WorkspaceMember, WorkspaceRole
from taskflow.libs.result import Result, Return

from .dtos import WorkspaceMemberResponse
from .errors import ALREADY_A_MEMBER, OWNER_ROLE_RESTRICTED, USER_NOT_FOUND


class InviteMemberUseCase:
    """
    Use case for adding members to a workspace.

    Business Rules:
    - Inviter must be ADMIN or OWNER
    - Only an OWNER can grant the OWNER role
    - Invitee must already have an account
    - A user can hold one membership per workspace
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        inviter_user_id: UUID,
        workspace_id: UUID,
        email: str,
        role: WorkspaceRole,
    ) -> Result[WorkspaceMemberResponse]:
        async with self.uow:
            access = await check_workspace_role(
                self.uow, workspace_id, inviter_user_id, WorkspaceRole.admin
            )
            if access.is_err():
                return Return.err(access.error)

            if role == WorkspaceRole.owner and access.value.role != WorkspaceRole.owner:
                return Return.err(OWNER_ROLE_RESTRICTED)

            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(USER_NOT_FOUND)

            existing = await self.uow.members.get_by_workspace_and_user(workspace_id, user.id)
            if existing is not None:
                return Return.err(ALREADY_A_MEMBER)

            try:
                membership = await self.uow.members.create(
                    WorkspaceMember(workspace_id=workspace_id, user_id=user.id, role=role)
                )
            except StoreError as exc:
                return Return.err(exc.error)

            await self.uow.commit()

            return Return.ok(WorkspaceMemberResponse.build(membership, user))
