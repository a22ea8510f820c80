from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskflow.adapter.repositories.integrity import is_unique_violation
from taskflow.app.repositories.errors import StoreError
from taskflow.app.repositories.workspace_member_repository import IWorkspaceMemberRepository
from taskflow.domain.entities import User, WorkspaceMember, WorkspaceRole
from taskflow.libs.result import Error, ErrorKind


class WorkspaceMemberRepository(IWorkspaceMemberRepository):
    """Workspace membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_workspace_and_user(
        self, workspace_id: Optional[UUID], user_id: Optional[UUID]
    ) -> Optional[WorkspaceMember]:
        """
        Get membership by (workspace_id, user_id).

        Both parts of the key are required; a None part short-circuits to
        None instead of compiling to ``= NULL`` (never true in SQL).
        """
        if workspace_id is None or user_id is None:
            return None
        stmt = select(WorkspaceMember).where(
            WorkspaceMember.workspace_id == workspace_id,
            WorkspaceMember.user_id == user_id,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_workspace(self, workspace_id: UUID) -> List[Tuple[WorkspaceMember, User]]:
        """All memberships of a workspace with users, oldest first"""
        stmt = (
            select(WorkspaceMember, User)
            .join(User, User.id == WorkspaceMember.user_id)
            .where(WorkspaceMember.workspace_id == workspace_id)
            .order_by(WorkspaceMember.created_at.asc())
        )
        result = await self.session.exec(stmt)
        return [(membership, user) for membership, user in result.all()]

    async def count_by_user(self, user_id: UUID) -> int:
        """Number of memberships of a user"""
        stmt = select(func.count()).select_from(WorkspaceMember).where(
            WorkspaceMember.user_id == user_id
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def count_owners_for_update(self, workspace_id: UUID) -> int:
        """
        Count OWNER memberships of a workspace.

        Selects the owner rows FOR UPDATE so two concurrent removals cannot
        both observe "2 owners". SQLite does not render FOR UPDATE; its
        single-writer lock gives the same guarantee.
        """
        stmt = (
            select(WorkspaceMember.id)
            .where(
                WorkspaceMember.workspace_id == workspace_id,
                WorkspaceMember.role == WorkspaceRole.owner,
            )
            .with_for_update()
        )
        result = await self.session.exec(stmt)
        return len(result.all())

    async def create(self, membership: WorkspaceMember) -> WorkspaceMember:
        """Create a new membership"""
        self.session.add(membership)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise StoreError(
                    Error(
                        "ALREADY_A_MEMBER",
                        "User is already a member of this workspace",
                        ErrorKind.conflict,
                    )
                ) from exc
            raise
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: WorkspaceMember) -> WorkspaceMember:
        """Update existing membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def delete(self, membership: WorkspaceMember) -> None:
        """Delete a membership"""
        await self.session.delete(membership)
        await self.session.flush()
