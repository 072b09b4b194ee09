# src/pipeline/inflight.py — v1
"""Single-flight registry: one running computation per key.

Concurrent callers asking for the same key await the same task instead of
starting duplicate work. The shared task is shielded, so a caller that is
cancelled (client disconnect, outer timeout) does not cancel the work the
other callers are waiting on. Only covers one process; the result store's
first-writer-wins insert handles races between processes.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InFlightRegistry(Generic[T]):
    """Deduplicate concurrent coroutine executions by key."""

    def __init__(self) -> None:
        self._tasks: dict[str, asyncio.Task[T]] = {}

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, key: str) -> bool:
        return key in self._tasks

    async def run(self, key: str, factory: Callable[[], Awaitable[T]]) -> T:
        """Await the running task for ``key`` or start one from ``factory``."""
        task = self._tasks.get(key)
        if task is None:
            task = asyncio.ensure_future(factory())
            self._tasks[key] = task
            task.add_done_callback(lambda t, k=key: self._forget(k, t))
        else:
            logger.debug("Joining in-flight computation %s", key[:12])
        return await asyncio.shield(task)

    def _forget(self, key: str, task: asyncio.Task[T]) -> None:
        if self._tasks.get(key) is task:
            del self._tasks[key]
        # Mark the outcome as retrieved even if every waiter was cancelled.
        if not task.cancelled():
            task.exception()
