"""Fire-and-forget asyncio tasks with logged failures"""

import asyncio
import logging
from typing import Any, Coroutine, Optional, Set

logger = logging.getLogger(__name__)


class TaskTracker:
    """
    Runs coroutines in the background and keeps a reference to each task
    until it finishes. Exceptions are logged and never propagated.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._tasks: Set[asyncio.Task] = set()

    def spawn(self, coro: Coroutine[Any, Any, Any], description: str) -> Optional[asyncio.Task]:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(f"[{self.name}] No running event loop, dropping: {description}")
            coro.close()
            return None

        task = loop.create_task(self._run(coro, description))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, coro: Coroutine[Any, Any, Any], description: str) -> None:
        try:
            await coro
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"[{self.name}] Background task failed ({description}): {e}", exc_info=True)

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait for every task spawned so far"""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
