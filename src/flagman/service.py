"""Composition root – wire settings, gateway and reconciler for one run."""
from __future__ import annotations

from collections.abc import Sequence

from flagman.adapters.gitlab import GitLabFlagGateway
from flagman.application.feature_flags import FeatureFlag, SyncPlan
from flagman.application.sync import Reconciler
from flagman.config import SyncSettings
from flagman.observability.logging import get_logger

logger = get_logger(__name__)


async def synchronize(settings: SyncSettings, desired: Sequence[FeatureFlag]) -> SyncPlan:
    """Reconcile the project named in *settings* against *desired*.

    With ``settings.dry_run`` the plan is computed and logged but nothing is
    applied. Cancelling the calling task cancels every in-flight request.
    """
    async with GitLabFlagGateway(settings) as gateway:
        reconciler = Reconciler.from_settings(gateway, settings)
        if settings.dry_run:
            plan = await reconciler.plan(desired)
            for name in plan.to_delete:
                logger.info("dry_run.delete", name=name)
            for flag in plan.to_add:
                logger.info("dry_run.add", name=flag.name)
            for flag in plan.to_update:
                logger.info("dry_run.update", name=flag.name)
            return plan
        return await reconciler.sync(desired)


__all__ = ["synchronize"]
