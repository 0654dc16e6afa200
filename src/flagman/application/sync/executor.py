"""Application sync – BatchExecutor."""
from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

from flagman.kernel.errors import BatchError
from flagman.observability.logging import get_logger
from flagman.resilience.bulkhead import ConcurrencyLimiter

T = TypeVar("T")

DEFAULT_APPLY_CONCURRENCY = 5

logger = get_logger(__name__)


class BatchExecutor:
    """Apply one async operation to every item of a batch.

    Each item gets its own task; at most ``concurrency_limit`` of them run
    the operation at the same time and the rest wait for a free slot. A
    failing item does not cancel its siblings: every item is attempted, and
    only after all of them finished is a single :class:`BatchError` raised,
    wrapping one of the failures. Successful side effects are not undone.
    """

    def __init__(self, concurrency_limit: int = DEFAULT_APPLY_CONCURRENCY) -> None:
        if concurrency_limit < 1:
            raise ValueError("concurrency_limit must be >= 1")
        self.concurrency_limit = concurrency_limit

    async def apply_all(
        self,
        items: Iterable[T],
        operation: Callable[[T], Awaitable[object]],
        concurrency_limit: int | None = None,
    ) -> None:
        items = list(items)
        if not items:
            return
        limiter = ConcurrencyLimiter(self.concurrency_limit if concurrency_limit is None else concurrency_limit)
        errors: list[Exception] = []

        async def run(item: T) -> None:
            async with limiter:
                try:
                    await operation(item)
                except Exception as exc:  # noqa: BLE001 – collected and re-raised below
                    logger.warning("batch.item_failed", item=_describe(item), error=repr(exc))
                    errors.append(exc)

        await asyncio.gather(*(run(item) for item in items))

        if errors:
            first = errors[0]
            raise BatchError(
                f"{len(errors)} of {len(items)} operations failed: {getattr(first, 'message', first)}",
                failed=len(errors),
                total=len(items),
                cause=first,
            ) from first


def _describe(item: object) -> str:
    name = getattr(item, "name", None)
    return name if isinstance(name, str) else str(item)


__all__ = ["DEFAULT_APPLY_CONCURRENCY", "BatchExecutor"]
