"""Config settings – SyncSettings for one reconciliation run."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from flagman.config.errors import InvalidSettingValueError, MissingRequiredSettingError

DEFAULT_BASE_URL = "https://gitlab.com/api/v4"
DEFAULT_FLAGS_FILE = "feature_flags.yaml"


@dataclasses.dataclass
class SyncSettings:
    """Everything a run needs: where the service is, how to authenticate,
    and how hard to hit it.

    Each field is read from ``FLAGMAN_<FIELD>`` by
    :class:`~flagman.config.settings.loaders.EnvSettingsLoader`; ``_options``
    names the command-line switch for the fields the CLI exposes directly.
    """

    _prefix: ClassVar[str] = "FLAGMAN"
    _options: ClassVar[dict[str, str]] = {
        "token": "--gitlab-token",
        "project_id": "--gitlab-project-id",
    }

    token: str
    project_id: str
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 10.0
    page_size: int = 100
    fetch_concurrency: int = 5
    apply_concurrency: int = 5
    flags_file: str = DEFAULT_FLAGS_FILE
    dry_run: bool = False

    def __post_init__(self) -> None:
        for name in ("token", "project_id"):
            if not getattr(self, name):
                raise missing_setting(type(self), name)
        if not self.base_url.startswith(("http://", "https://")):
            raise InvalidSettingValueError("base_url", self.base_url, "must be an http(s) URL")
        if self.request_timeout <= 0:
            raise InvalidSettingValueError("request_timeout", self.request_timeout, "must be positive")
        for name in ("page_size", "fetch_concurrency", "apply_concurrency"):
            if getattr(self, name) < 1:
                raise InvalidSettingValueError(name, getattr(self, name), "must be >= 1")
        self.base_url = self.base_url.rstrip("/")

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{field.name}={'[REDACTED]' if field.name == 'token' else repr(getattr(self, field.name))}"
            for field in dataclasses.fields(self)
        )
        return f"SyncSettings({fields})"


def env_key(settings_class: type, field_name: str) -> str:
    """``FLAGMAN_PAGE_SIZE`` for ``page_size`` on a class with ``_prefix = "FLAGMAN"``."""
    prefix = getattr(settings_class, "_prefix", "")
    return f"{prefix}_{field_name}".upper().lstrip("_")


def missing_setting(settings_class: type, field_name: str) -> MissingRequiredSettingError:
    options = getattr(settings_class, "_options", {})
    return MissingRequiredSettingError(env_key(settings_class, field_name), options.get(field_name))


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_FLAGS_FILE", "SyncSettings", "env_key", "missing_setting"]
