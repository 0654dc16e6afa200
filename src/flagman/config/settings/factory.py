"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from flagman.config.errors import ConfigError
from flagman.config.settings.loaders import SettingsLoader, is_required
from flagman.config.settings.sync import missing_setting

T = TypeVar("T")


class SettingsFactory:
    """Build a settings dataclass from layered sources.

    Precedence, lowest first: each loader in order, then *overrides*.
    ``None`` in *overrides* means "option not given" and never masks a
    value from a loader.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        MissingRequiredSettingError
            A field without a default has no value in any source.
        InvalidSettingValueError
            A value was found but the dataclass rejected it.
        ConfigError
            Any other construction failure.
        """
        merged: dict[str, Any] = {}
        for loader in loaders or []:
            merged.update(loader.values(settings_cls))
        merged.update({key: value for key, value in (overrides or {}).items() if value is not None})

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name not in merged and is_required(field):
                raise missing_setting(settings_cls, field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
