"""Infrastructure errors: failures talking to the remote flag service."""

from __future__ import annotations

from typing import Any

from flagman.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class RemoteError(InfrastructureError):
    """A single remote call failed.

    Covers non-success statuses, transport failures, timeouts and
    undecodable responses. ``operation`` is one of ``list``, ``create`` or
    ``delete``; ``target`` is the page number or the flag name involved.
    """

    default_code = "remote_error"

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        target: str | int | None = None,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        detail = {"operation": operation, "target": target}
        if status_code is not None:
            detail["status_code"] = status_code
        detail.update(kwargs.pop("detail", None) or {})
        super().__init__(message, detail=detail, **kwargs)
        self.operation = operation
        self.target = target
        self.status_code = status_code


__all__ = ["InfrastructureError", "RemoteError"]
