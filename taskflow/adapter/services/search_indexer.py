import logging
from uuid import UUID

from taskflow.app.services.search_indexer import ISearchIndexer

logger = logging.getLogger(__name__)


class LoggingSearchIndexer(ISearchIndexer):
    """Default indexer used when no search backend is wired in"""

    async def sync_workspace(self, workspace_id: UUID) -> None:
        logger.debug(f"Search index sync requested for workspace {workspace_id}")
