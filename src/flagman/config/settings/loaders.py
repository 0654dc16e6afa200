"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from flagman.config.errors import ConfigError, InvalidSettingValueError
from flagman.config.settings.sync import env_key, missing_setting

T = TypeVar("T")


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def values(self, settings_class: type[Any]) -> dict[str, Any]:
        """Return the fields this source provides, already coerced."""

    def load(self, settings_class: type[T]) -> T:
        """Construct *settings_class* from this source alone."""
        kwargs = self.values(settings_class)
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            if field.name not in kwargs and is_required(field):
                raise missing_setting(settings_class, field.name)
        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to load settings: {exc}") from exc


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables (``<PREFIX>_<FIELD>``)."""

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = environ

    def values(self, settings_class: type[Any]) -> dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = env_key(settings_class, field.name)
            raw = environ.get(key)
            if raw is None:
                continue
            kwargs[field.name] = self._coerce(key, raw, field.type)
        return kwargs

    def _coerce(self, key: str, value: str, type_hint: Any) -> Any:
        try:
            if type_hint is bool or type_hint == "bool":
                return value.lower() in ("1", "true", "yes", "on")
            if type_hint is int or type_hint == "int":
                return int(value)
            if type_hint is float or type_hint == "float":
                return float(value)
        except ValueError as exc:
            raise InvalidSettingValueError(key, value, str(exc)) from exc
        return value


class DotenvSettingsLoader(EnvSettingsLoader):
    """Load a ``.env`` file into the environment, then read it like ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        super().__init__()
        self._env_file = env_file
        self._override = override

    def values(self, settings_class: type[Any]) -> dict[str, Any]:
        load_dotenv(self._env_file, override=self._override)
        return super().values(settings_class)


def is_required(field: dataclasses.Field[Any]) -> bool:
    return (
        field.default is dataclasses.MISSING
        and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
    )


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "is_required"]
