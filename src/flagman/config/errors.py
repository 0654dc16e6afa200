"""Configuration errors."""
from __future__ import annotations

from flagman.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """The run configuration is incomplete or invalid."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required setting was given neither as an option nor in the environment.

    ``option`` names the command-line switch that supplies it, when one exists.
    """
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, option: str | None = None) -> None:
        hint = f" (pass {option} or set {setting_name})" if option else ""
        super().__init__(
            f"Required setting '{setting_name}' is missing{hint}",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name
        self.option = option


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value cannot be used."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
