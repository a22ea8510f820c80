from abc import ABC, abstractmethod
from uuid import UUID


class ISearchIndexer(ABC):
    """Search index the workspace membership changes are pushed to"""

    @abstractmethod
    async def sync_workspace(self, workspace_id: UUID) -> None:
        """Re-synchronize access data for a workspace"""
        pass
