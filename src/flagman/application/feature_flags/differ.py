"""Application feature flags – desired/remote diff producing a SyncPlan."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from flagman.application.feature_flags.equality import structurally_equal
from flagman.application.feature_flags.feature_flag import FeatureFlag


@dataclasses.dataclass
class SyncPlan:
    """Operations needed to converge the remote set to the desired set.

    ``to_add``, ``to_update`` and ``to_delete`` are disjoint by flag name.
    ``to_update`` holds the desired version of each flag; ``unchanged``
    lists the names that need no operation.
    """

    to_add: list[FeatureFlag] = dataclasses.field(default_factory=list)
    to_update: list[FeatureFlag] = dataclasses.field(default_factory=list)
    to_delete: list[str] = dataclasses.field(default_factory=list)
    unchanged: list[str] = dataclasses.field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of remote operations (an update counts once)."""
        return len(self.to_add) + len(self.to_update) + len(self.to_delete)

    @property
    def is_empty(self) -> bool:
        return self.total == 0


def diff(desired: Iterable[FeatureFlag], remote: Iterable[FeatureFlag]) -> SyncPlan:
    """Classify every desired flag as unchanged/add/update and every
    remote-only flag as delete.

    Desired names are assumed unique. Duplicate remote names collapse to a
    single lookup entry (the last one wins) and a single delete.
    """
    desired = list(desired)
    remote = list(remote)
    remote_by_name = {flag.name: flag for flag in remote}
    desired_names = {flag.name for flag in desired}

    plan = SyncPlan()
    for flag in desired:
        existing = remote_by_name.get(flag.name)
        if existing is None:
            plan.to_add.append(flag)
        elif structurally_equal(flag, existing):
            plan.unchanged.append(flag.name)
        else:
            plan.to_update.append(flag)

    for name in remote_by_name:
        if name not in desired_names:
            plan.to_delete.append(name)
    return plan


__all__ = ["SyncPlan", "diff"]
