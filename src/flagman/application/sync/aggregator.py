"""Application sync – PageAggregator.

Fetches the complete remote flag set. Page 1 is requested first as a probe
to learn ``total_pages`` and ``per_page``; the remaining pages are then
fetched concurrently, at most ``max_concurrency`` at a time. Pages are
independent of each other, so completion order does not matter and the
combined result has no guaranteed order.
"""
from __future__ import annotations

import asyncio

from flagman.application.feature_flags.feature_flag import FeatureFlag
from flagman.application.feature_flags.store import FlagStore
from flagman.kernel.errors import AggregationError
from flagman.observability.logging import get_logger
from flagman.resilience.bulkhead import ConcurrencyLimiter

DEFAULT_PAGE_SIZE = 100
DEFAULT_FETCH_CONCURRENCY = 5

logger = get_logger(__name__)


class PageAggregator:
    """Drive concurrent page retrieval against a :class:`FlagStore`."""

    def __init__(
        self,
        store: FlagStore,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_concurrency: int = DEFAULT_FETCH_CONCURRENCY,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")
        self._store = store
        self.page_size = page_size
        self.max_concurrency = max_concurrency

    async def fetch_all(self) -> list[FeatureFlag]:
        """Return every remote flag.

        Issues exactly ``total_pages`` requests (the probe doubles as page 1).
        If any page fails the whole fetch fails with :class:`AggregationError`
        wrapping the failure of the lowest failed page; pages already retrieved are
        discarded.
        """
        try:
            probe_flags, pagination = await self._store.list_page(1, self.page_size)
        except Exception as exc:  # noqa: BLE001
            raise AggregationError(f"failed to fetch page 1: {_reason(exc)}", cause=exc) from exc

        total_pages = pagination.total_pages
        if total_pages <= 1:
            return list(probe_flags)

        # non-probe pages must use the size the service actually applied,
        # otherwise page numbers no longer line up with total_pages
        per_page = pagination.per_page or self.page_size
        logger.debug("pages.fetching", total_pages=total_pages, per_page=per_page)

        limiter = ConcurrencyLimiter(self.max_concurrency)
        pages: dict[int, list[FeatureFlag]] = {1: list(probe_flags)}
        errors: list[tuple[int, Exception]] = []

        async def fetch(page: int) -> None:
            async with limiter:
                try:
                    flags, _ = await self._store.list_page(page, per_page)
                except Exception as exc:  # noqa: BLE001 – reported together below
                    errors.append((page, exc))
                    return
            pages[page] = list(flags)

        await asyncio.gather(*(fetch(page) for page in range(2, total_pages + 1)))

        if errors:
            failed_page, first = min(errors, key=lambda error: error[0])
            raise AggregationError(
                f"failed to fetch page {failed_page}: {_reason(first)}",
                detail={"failed_pages": len(errors), "total_pages": total_pages},
                cause=first,
            ) from first
        return [flag for page in sorted(pages) for flag in pages[page]]


def _reason(exc: Exception) -> str:
    return getattr(exc, "message", None) or str(exc) or type(exc).__name__


__all__ = ["DEFAULT_FETCH_CONCURRENCY", "DEFAULT_PAGE_SIZE", "PageAggregator"]
