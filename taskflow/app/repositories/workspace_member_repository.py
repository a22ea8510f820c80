from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from taskflow.domain.entities import User, WorkspaceMember


class IWorkspaceMemberRepository(ABC):
    """Workspace membership repository interface - application layer"""

    @abstractmethod
    async def get_by_workspace_and_user(
        self, workspace_id: Optional[UUID], user_id: Optional[UUID]
    ) -> Optional[WorkspaceMember]:
        """Get membership by its (workspace, user) key. A missing key part yields None."""
        pass

    @abstractmethod
    async def list_by_workspace(self, workspace_id: UUID) -> List[Tuple[WorkspaceMember, User]]:
        """All memberships of a workspace with their users, oldest first"""
        pass

    @abstractmethod
    async def count_by_user(self, user_id: UUID) -> int:
        """Number of workspaces a user belongs to"""
        pass

    @abstractmethod
    async def count_owners_for_update(self, workspace_id: UUID) -> int:
        """Count OWNER memberships, locking those rows for the rest of the transaction"""
        pass

    @abstractmethod
    async def create(self, membership: WorkspaceMember) -> WorkspaceMember:
        """Create a new membership. Raises StoreError(CONFLICT) if it already exists."""
        pass

    @abstractmethod
    async def update(self, membership: WorkspaceMember) -> WorkspaceMember:
        """Update existing membership"""
        pass

    @abstractmethod
    async def delete(self, membership: WorkspaceMember) -> None:
        """Delete a membership"""
        pass
