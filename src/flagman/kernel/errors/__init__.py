"""Kernel error hierarchy, re-exported.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   ├── AggregationError
    │   ├── BatchError
    │   ├── SyncError
    │   ├── DesiredStateError
    │   └── ConfigError      (flagman.config.errors)
    └── InfrastructureError  (infrastructure.py)
        └── RemoteError
"""

from flagman.kernel.errors.application import (
    AggregationError,
    ApplicationError,
    BatchError,
    DesiredStateError,
    SyncError,
    SyncStage,
)
from flagman.kernel.errors.base import BaseError
from flagman.kernel.errors.infrastructure import InfrastructureError, RemoteError

__all__ = [
    "AggregationError",
    "ApplicationError",
    "BaseError",
    "BatchError",
    "DesiredStateError",
    "InfrastructureError",
    "RemoteError",
    "SyncError",
    "SyncStage",
]
