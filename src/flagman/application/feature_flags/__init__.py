"""Application feature flags – value objects, diffing, store port and loader."""
from flagman.application.feature_flags.feature_flag import FeatureFlag, Scope, Strategy
from flagman.application.feature_flags.equality import scopes_equal, structurally_equal
from flagman.application.feature_flags.differ import SyncPlan, diff
from flagman.application.feature_flags.store import FlagStore
from flagman.application.feature_flags.loader import load_desired_flags, parse_desired_flags

__all__ = [
    "FeatureFlag",
    "FlagStore",
    "Scope",
    "Strategy",
    "SyncPlan",
    "diff",
    "load_desired_flags",
    "parse_desired_flags",
    "scopes_equal",
    "structurally_equal",
]
