"""Resilience – ConcurrencyLimiter."""
from __future__ import annotations

import asyncio


class ConcurrencyLimiter:
    """Caps the number of concurrent executions.

    Entering waits until a slot is free; nothing is rejected. ``peak``
    records the highest number of simultaneous holders seen.
    """

    def __init__(self, max_concurrent: int) -> None:
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be >= 1")
        self._semaphore = asyncio.Semaphore(max_concurrent)
        self.max_concurrent = max_concurrent
        self.active = 0
        self.peak = 0

    async def __aenter__(self) -> "ConcurrencyLimiter":
        await self._semaphore.acquire()
        self.active += 1
        self.peak = max(self.peak, self.active)
        return self

    async def __aexit__(self, *_: object) -> None:
        self.active -= 1
        self._semaphore.release()


__all__ = ["ConcurrencyLimiter"]
