"""
Update Member Role Use Case

Changes a member's role within a workspace.
"""

from uuid import UUID

from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.app.use_cases.access import check_workspace_role
from taskflow.domain.entities import WorkspaceRole
from taskflow.libs.result import Result, Return

from .dtos import WorkspaceMemberResponse
from .errors import LAST_OWNER_DOWNGRADE, MEMBER_NOT_FOUND, OWNER_ROLE_RESTRICTED, USER_NOT_FOUND


class UpdateMemberRoleUseCase:
    """
    Use case for changing a member's role.

    Business Rules:
    - Requester must be ADMIN or OWNER
    - Downgrading the sole OWNER fails (VALIDATION), whoever asks
    - Only an OWNER can change an OWNER's role or grant OWNER
    - Owner count is re-read under lock in the same transaction as the update
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        requester_user_id: UUID,
        workspace_id: UUID,
        target_user_id: UUID,
        new_role: WorkspaceRole,
    ) -> Result[WorkspaceMemberResponse]:
        """
        Execute update member role use case.

        Args:
            requester_user_id: User making the change
            workspace_id: Workspace ID
            target_user_id: User whose role is being changed
            new_role: Role to assign

        Returns:
            Result with the updated member, or Error
        """
        async with self.uow:
            access = await check_workspace_role(
                self.uow, workspace_id, requester_user_id, WorkspaceRole.admin
            )
            if access.is_err():
                return Return.err(access.error)
            requester = access.value

            target = await self.uow.members.get_by_workspace_and_user(workspace_id, target_user_id)
            if target is None:
                return Return.err(MEMBER_NOT_FOUND)

            if target.role == WorkspaceRole.owner and new_role != WorkspaceRole.owner:
                owner_count = await self.uow.members.count_owners_for_update(workspace_id)
                if owner_count <= 1:
                    return Return.err(LAST_OWNER_DOWNGRADE)

            touches_owner = WorkspaceRole.owner in (target.role, new_role)
            if touches_owner and requester.role != WorkspaceRole.owner:
                return Return.err(OWNER_ROLE_RESTRICTED)

            user = await self.uow.users.get_by_id(target_user_id)
            if user is None:
                return Return.err(USER_NOT_FOUND)

            target.role = new_role
            target = await self.uow.members.update(target)

            await self.uow.commit()

            return Return.ok(WorkspaceMemberResponse.build(target, user))
