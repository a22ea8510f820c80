"""
Background Dispatcher

Fire-and-forget work that must never block or fail the triggering request.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Set

logger = logging.getLogger(__name__)


class BackgroundDispatcher:
    """
    Runs submitted coroutines as asyncio tasks.

    Failures are logged and counted in ``failure_count``; they are never
    re-raised to the submitter.
    """

    def __init__(self):
        self._tasks: Set[asyncio.Task] = set()
        self.submitted_count = 0
        self.failure_count = 0

    def submit(self, name: str, job: Callable[[], Awaitable[None]]) -> asyncio.Task:
        self.submitted_count += 1
        task = asyncio.create_task(self._run(name, job), name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, name: str, job: Callable[[], Awaitable[None]]) -> None:
        try:
            await job()
        except asyncio.CancelledError:
            logger.warning(f"Background job cancelled: {name}")
            raise
        except Exception:
            self.failure_count += 1
            logger.exception(f"Background job failed: {name}")

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait for every outstanding job (shutdown, tests)."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
