"""Application sync – Reconciler.

One run: fetch the remote set, diff it against the desired set, then apply
the delete, add and update batches one stage after another. A stage only
starts once the previous one has fully completed; the first failing stage
aborts the run with :class:`SyncError` and nothing already applied is
rolled back.

An update is a delete followed by a create of the desired version. If the
create fails the flag stays deleted remotely and the run reports an
``update`` stage failure.
"""
from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Sequence
from typing import Any

from flagman.application.feature_flags.differ import SyncPlan, diff
from flagman.application.feature_flags.feature_flag import FeatureFlag
from flagman.application.feature_flags.store import FlagStore
from flagman.application.sync.aggregator import (
    DEFAULT_FETCH_CONCURRENCY,
    DEFAULT_PAGE_SIZE,
    PageAggregator,
)
from flagman.application.sync.executor import DEFAULT_APPLY_CONCURRENCY, BatchExecutor
from flagman.config import SyncSettings
from flagman.kernel.errors import AggregationError, BatchError, SyncError, SyncStage
from flagman.observability.logging import get_logger

logger = get_logger(__name__)


class Reconciler:
    """Converge the remote flag set held by *store* to a desired set."""

    def __init__(
        self,
        store: FlagStore,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        fetch_concurrency: int = DEFAULT_FETCH_CONCURRENCY,
        apply_concurrency: int = DEFAULT_APPLY_CONCURRENCY,
    ) -> None:
        self._store = store
        self._aggregator = PageAggregator(store, page_size=page_size, max_concurrency=fetch_concurrency)
        self._executor = BatchExecutor(apply_concurrency)

    @classmethod
    def from_settings(cls, store: FlagStore, settings: SyncSettings) -> "Reconciler":
        return cls(
            store,
            page_size=settings.page_size,
            fetch_concurrency=settings.fetch_concurrency,
            apply_concurrency=settings.apply_concurrency,
        )

    async def plan(self, desired: Sequence[FeatureFlag]) -> SyncPlan:
        """Fetch the remote set and diff it against *desired*; apply nothing."""
        logger.info("sync.desired_loaded", total=len(desired))
        try:
            remote = await self._aggregator.fetch_all()
        except AggregationError as exc:
            raise SyncError(SyncStage.FETCH, cause=exc) from exc
        logger.info("sync.remote_fetched", total=len(remote))

        plan = diff(desired, remote)
        logger.info(
            "sync.planned",
            to_delete=len(plan.to_delete),
            to_add=len(plan.to_add),
            to_update=len(plan.to_update),
            unchanged=len(plan.unchanged),
        )
        return plan

    async def sync(self, desired: Sequence[FeatureFlag]) -> SyncPlan:
        """Run a full reconciliation and return the plan that was applied.

        Raises:
            SyncError: tagged with the stage (fetch/delete/add/update) that
                failed; later stages were not attempted.
        """
        plan = await self.plan(desired)
        await self.apply(plan)
        return plan

    async def apply(self, plan: SyncPlan) -> None:
        """Apply a previously computed plan stage by stage."""
        await self._run_stage(SyncStage.DELETE, plan.to_delete, self._store.delete_by_name)
        await self._run_stage(SyncStage.ADD, plan.to_add, self._store.create)
        await self._run_stage(SyncStage.UPDATE, plan.to_update, self._replace)
        logger.info("sync.completed", synced=plan.total)

    async def _replace(self, flag: FeatureFlag) -> None:
        await self._store.delete_by_name(flag.name)
        await self._store.create(flag)

    async def _run_stage(
        self,
        stage: SyncStage,
        items: Iterable[Any],
        operation: Callable[[Any], Awaitable[None]],
    ) -> None:
        items = list(items)
        if not items:
            return
        logger.info("sync.stage_started", stage=stage.value, count=len(items))
        try:
            await self._executor.apply_all(items, operation)
        except BatchError as exc:
            raise SyncError(stage, cause=exc) from exc


__all__ = ["Reconciler"]
