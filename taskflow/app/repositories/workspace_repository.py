from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from taskflow.domain.entities import Workspace, WorkspaceMember


class IWorkspaceRepository(ABC):
    """Workspace repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, workspace_id: UUID) -> Optional[Workspace]:
        """Get workspace by ID"""
        pass

    @abstractmethod
    async def create(self, workspace: Workspace) -> Workspace:
        """Create a new workspace"""
        pass

    @abstractmethod
    async def update(self, workspace: Workspace) -> Workspace:
        """Update existing workspace"""
        pass

    @abstractmethod
    async def list_for_user(self, user_id: UUID) -> List[Tuple[Workspace, WorkspaceMember]]:
        """Workspaces the user belongs to with the user's membership, newest first"""
        pass
