"""Observability – redaction of credentials in log events."""
from __future__ import annotations

import re
from typing import Any

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "secret", "token", "private_token", "private-token",
    "gitlab_token", "api_key", "authorization",
})

# GitLab personal, project, group and deploy token prefixes.
_TOKEN_PATTERN = re.compile(r"\b(?:glpat|glptt|gldt|glcbt|gloas)-[0-9A-Za-z_\-]{8,}")


class SensitiveFieldsFilter:
    """Mask credentials before an event reaches a renderer.

    Values under a sensitive key are replaced outright; GitLab tokens that
    leak into free text (an error message quoting a URL, say) are masked
    wherever they appear.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if k.lower() in self._fields else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if k.lower() in self._fields else self._scrub(v)) for k, v in data.items()}

    def _scrub(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.redact_deep(value)
        if isinstance(value, (list, tuple)):
            return type(value)(self._scrub(item) for item in value)
        if isinstance(value, str):
            return _TOKEN_PATTERN.sub(self.REDACTED, value)
        return value


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
