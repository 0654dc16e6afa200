"""Root error class for the flagman error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    ``str(err)`` is the message followed by the non-empty detail fields, so
    the same error reads well in a log line and on the terminal::

        HTTP 500 Internal Server Error from DELETE /projects/1/feature_flags/a
        (operation=delete, target=a, status_code=500)

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Context identifying what failed (page, flag, stage, counts).
        cause: Original exception; also set as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        context = ", ".join(f"{key}={value}" for key, value in self.detail.items() if value is not None)
        return f"{self.message} ({context})" if context else self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def root_cause(self) -> BaseException:
        """Follow ``__cause__`` down to the original exception."""
        current: BaseException = self
        while current.__cause__ is not None:
            current = current.__cause__
        return current

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for structured log fields."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = str(self.cause)
        return payload


__all__ = ["BaseError"]
