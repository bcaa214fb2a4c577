"""
Single-flight request deduplication.
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, Hashable

from shared.logging import get_logger


class SingleFlight:
    """Map of key to a shared in-flight task.

    Concurrent callers for the same key await one task instead of starting
    their own. Resolved tasks stay in the map until ``clear()``. A task that
    fails or is cancelled is removed from the map as soon as it finishes:
    its current awaiters all see the error, and the next caller starts a
    fresh task instead of receiving the cached failure.
    """

    def __init__(self, name: str = "default"):
        self.name = name
        self.logger = get_logger(f"kong_admin.single_flight.{name}")
        self._tasks: Dict[Hashable, "asyncio.Task[Any]"] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    async def run(self, key: Hashable, factory: Callable[[], Awaitable[Any]]) -> Any:
        """Return the result for ``key``, starting ``factory()`` only on a miss."""
        task = self._tasks.get(key)
        if task is None:
            self.logger.debug("Cache miss", key=key)
            task = asyncio.ensure_future(factory())
            self._tasks[key] = task
            task.add_done_callback(lambda done, key=key: self._forget_failure(key, done))
        else:
            self.logger.debug("Cache hit", key=key, pending=not task.done())

        return await asyncio.shield(task)

    def clear(self) -> None:
        """Discard every entry. Tasks already running still finish for their awaiters."""
        if self._tasks:
            self.logger.debug("Cache cleared", entries=len(self._tasks))
        self._tasks = {}

    def _forget_failure(self, key: Hashable, task: "asyncio.Task[Any]") -> None:
        if task.cancelled() or task.exception() is not None:
            # Only evict if the map still holds this very task
            if self._tasks.get(key) is task:
                del self._tasks[key]
