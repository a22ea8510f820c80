from uuid import UUID

from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.app.use_cases.access import check_workspace_role
from taskflow.domain.entities import WorkspaceRole
from taskflow.libs.result import Result, Return

from .dtos import WorkspaceResponse
from .errors import WORKSPACE_NOT_FOUND


class GetWorkspaceUseCase:
    """Workspace details for any member"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, workspace_id: UUID) -> Result[WorkspaceResponse]:
        async with self.uow:
            access = await check_workspace_role(
                self.uow, workspace_id, user_id, WorkspaceRole.member
            )
            if access.is_err():
                return Return.err(access.error)

            workspace = await self.uow.workspaces.get_by_id(workspace_id)
            if workspace is None:
                return Return.err(WORKSPACE_NOT_FOUND)

            return Return.ok(WorkspaceResponse.build(workspace, access.value.role))
