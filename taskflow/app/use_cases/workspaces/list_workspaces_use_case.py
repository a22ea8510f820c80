from typing import List
from uuid import UUID

from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.libs.result import Result, Return

from .dtos import WorkspaceResponse


class ListWorkspacesUseCase:
    """Workspaces the user belongs to, newest membership first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[List[WorkspaceResponse]]:
        async with self.uow:
            rows = await self.uow.workspaces.list_for_user(user_id)
            return Return.ok(
                [WorkspaceResponse.build(workspace, membership.role) for workspace, membership in rows]
            )
