"""flagman – reconcile GitLab feature flags against a declarative definition file."""

__version__ = "0.1.0"

from flagman.application.feature_flags import FeatureFlag, Scope, Strategy, SyncPlan, diff, structurally_equal  # noqa: E402
from flagman.application.sync import BatchExecutor, PageAggregator, Reconciler  # noqa: E402

__all__ = [
    "BatchExecutor",
    "FeatureFlag",
    "PageAggregator",
    "Reconciler",
    "Scope",
    "Strategy",
    "SyncPlan",
    "__version__",
    "diff",
    "structurally_equal",
]
