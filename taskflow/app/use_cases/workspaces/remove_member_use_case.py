"""
Remove Member from Workspace Use Case

Handles removing members from a workspace.
"""

from uuid import UUID

from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.app.use_cases.access import check_workspace_role
from taskflow.domain.entities import WorkspaceRole
from taskflow.libs.result import Result, Return

from .dtos import RemoveMemberResponse
from .errors import LAST_OWNER_REMOVAL, MEMBER_NOT_FOUND, OWNER_ROLE_RESTRICTED, OWNER_SELF_REMOVAL


class RemoveMemberUseCase:
    """
    Use case for removing members from a workspace.

    Business Rules:
    - Requester must be ADMIN or OWNER
    - Removing the sole OWNER fails (VALIDATION), even for that OWNER
    - An OWNER cannot remove themselves, even with other OWNERs present
    - Removing one of several OWNERs succeeds, but only an OWNER may do it
    - Owner count is re-read under lock in the same transaction as the delete
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        requester_user_id: UUID,
        workspace_id: UUID,
        target_user_id: UUID,
    ) -> Result[RemoveMemberResponse]:
        """
        Execute remove member use case.

        Args:
            requester_user_id: User ID of the person removing the member
            workspace_id: Workspace ID
            target_user_id: User ID of the member to remove

        Returns:
            Result with RemoveMemberResponse DTO, or Error
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

            if target.role == WorkspaceRole.owner:
                owner_count = await self.uow.members.count_owners_for_update(workspace_id)
                if owner_count <= 1:
                    return Return.err(LAST_OWNER_REMOVAL)
                if target.user_id == requester.user_id:
                    return Return.err(OWNER_SELF_REMOVAL)
                if requester.role != WorkspaceRole.owner:
                    return Return.err(OWNER_ROLE_RESTRICTED)

            await self.uow.members.delete(target)

            await self.uow.commit()

            return Return.ok(RemoveMemberResponse(status="removed"))
