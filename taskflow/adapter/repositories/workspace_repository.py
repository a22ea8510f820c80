from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskflow.app.repositories.workspace_repository import IWorkspaceRepository
from taskflow.domain.base import utcnow
from taskflow.domain.entities import Workspace, WorkspaceMember


class WorkspaceRepository(IWorkspaceRepository):
    """Workspace repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, workspace_id: UUID) -> Optional[Workspace]:
        """Get workspace by ID"""
        stmt = select(Workspace).where(Workspace.id == workspace_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, workspace: Workspace) -> Workspace:
        """Create a new workspace"""
        self.session.add(workspace)
        await self.session.flush()
        await self.session.refresh(workspace)
        return workspace

    async def update(self, workspace: Workspace) -> Workspace:
        """Update existing workspace"""
        workspace.updated_at = utcnow()
        self.session.add(workspace)
        await self.session.flush()
        await self.session.refresh(workspace)
        return workspace

    async def list_for_user(self, user_id: UUID) -> List[Tuple[Workspace, WorkspaceMember]]:
        """Workspaces of a user with the user's membership, newest membership first"""
        stmt = (
            select(Workspace, WorkspaceMember)
            .join(WorkspaceMember, WorkspaceMember.workspace_id == Workspace.id)
            .where(WorkspaceMember.user_id == user_id)
            .order_by(WorkspaceMember.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return [(workspace, membership) for workspace, membership in result.all()]
