from typing import List
from uuid import UUID

from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.app.use_cases.access import check_workspace_role
from taskflow.domain.entities import WorkspaceRole
from taskflow.libs.result import Result, Return

from .dtos import WorkspaceMemberResponse


class ListMembersUseCase:
    """Members of a workspace, oldest first. Visible to any member."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, workspace_id: UUID
    ) -> Result[List[WorkspaceMemberResponse]]:
        async with self.uow:
            access = await check_workspace_role(
                self.uow, workspace_id, user_id, WorkspaceRole.member
            )
            if access.is_err():
                return Return.err(access.error)

            rows = await self.uow.members.list_by_workspace(workspace_id)
            return Return.ok(
                [WorkspaceMemberResponse.build(membership, user) for membership, user in rows]
            )
