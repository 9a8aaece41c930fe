"""Concurrency limiter — per-connector admission control with task accounting.

Wraps an asyncio.Semaphore and tracks how many requests are running and how
many are waiting for a slot, so dispatchers can pick the least-busy connector.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class ConcurrencyLimiter:
    """Bounded-concurrency gate owned by a single connector.

    Usage:
        limiter = ConcurrencyLimiter(10)

        async with limiter.slot():
            await client.get(...)

        limiter.task_count  # active + pending
    """

    def __init__(self, max_concurrent: int):
        self.max_concurrent = max_concurrent
        self._semaphore = asyncio.Semaphore(max_concurrent)
        self.active_count = 0  # Currently in-flight
        self.pending_count = 0  # Waiting behind the ceiling

    @property
    def task_count(self) -> int:
        return self.active_count + self.pending_count

    @asynccontextmanager
    async def slot(self) -> AsyncIterator[None]:
        """Hold one slot for the duration of the block."""
        self.pending_count += 1
        try:
            await self._semaphore.acquire()
        finally:
            self.pending_count -= 1

        self.active_count += 1
        try:
            yield
        finally:
            self.active_count -= 1
            self._semaphore.release()

    def get_stats(self) -> dict:
        return {
            "active_requests": self.active_count,
            "pending_requests": self.pending_count,
            "max_concurrent": self.max_concurrent,
        }
