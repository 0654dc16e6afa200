"""Application-layer errors: reconciliation stages and collaborators."""

from __future__ import annotations

from enum import Enum
from typing import Any

from flagman.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class AggregationError(ApplicationError):
    """Fetching the complete remote flag set failed.

    Wraps the first :class:`RemoteError` observed across all page fetches;
    any later page failures are discarded.
    """

    default_code = "aggregation_failed"


class BatchError(ApplicationError):
    """At least one operation of a concurrent batch failed.

    ``cause`` is one representative error; ``detail`` carries the
    ``failed`` / ``total`` counts.
    """

    default_code = "batch_failed"

    def __init__(
        self,
        message: str,
        *,
        failed: int,
        total: int,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, detail={"failed": failed, "total": total}, **kwargs)
        self.failed = failed
        self.total = total


class SyncStage(str, Enum):
    FETCH = "fetch"
    DELETE = "delete"
    ADD = "add"
    UPDATE = "update"


class SyncError(ApplicationError):
    """A reconciliation run aborted; ``stage`` names the stage that failed."""

    default_code = "sync_failed"

    def __init__(self, stage: SyncStage, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"failed to {_STAGE_VERBS[stage]} feature flags",
            detail={"stage": stage.value},
            **kwargs,
        )
        self.stage = stage


class DesiredStateError(ApplicationError):
    """The desired-state document could not be read or is invalid."""

    default_code = "desired_state_invalid"


_STAGE_VERBS = {
    SyncStage.FETCH: "retrieve existing",
    SyncStage.DELETE: "delete",
    SyncStage.ADD: "add",
    SyncStage.UPDATE: "update",
}


__all__ = [
    "AggregationError",
    "ApplicationError",
    "BatchError",
    "DesiredStateError",
    "SyncError",
    "SyncStage",
]
