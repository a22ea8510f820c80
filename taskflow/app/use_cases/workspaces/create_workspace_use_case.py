from uuid import UUID

from taskflow.app.services.unit_of_work import UnitOfWork
from taskflow.domain.entities import Workspace, WorkspaceMember, WorkspaceRole
from taskflow.libs.result import Result, Return

from .dtos import WorkspaceResponse


class CreateWorkspaceUseCase:
    """
    Creates a workspace and makes the creator its OWNER.

    Both rows commit together, so a workspace never exists without an owner.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, name: str) -> Result[WorkspaceResponse]:
        async with self.uow:
            workspace = await self.uow.workspaces.create(Workspace(name=name, owner_id=user_id))
            await self.uow.members.create(
                WorkspaceMember(
                    workspace_id=workspace.id,
                    user_id=user_id,
                    role=WorkspaceRole.owner,
                )
            )

            await self.uow.commit()

            return Return.ok(WorkspaceResponse.build(workspace, WorkspaceRole.owner))
