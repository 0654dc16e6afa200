"""Unit tests for SyncSettings, loaders and SettingsFactory."""

from __future__ import annotations

import pathlib

import pytest

from flagman.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingsFactory,
    SyncSettings,
)


class TestSyncSettings:
    def test_defaults(self) -> None:
        settings = SyncSettings(token="t", project_id="42")
        assert settings.base_url == "https://gitlab.com/api/v4"
        assert settings.request_timeout == 10.0
        assert settings.page_size == 100
        assert settings.fetch_concurrency == 5
        assert settings.apply_concurrency == 5
        assert settings.flags_file == "feature_flags.yaml"
        assert settings.dry_run is False

    def test_trailing_slash_stripped(self) -> None:
        settings = SyncSettings(token="t", project_id="42", base_url="https://gitlab.example.com/api/v4/")
        assert settings.base_url == "https://gitlab.example.com/api/v4"

    def test_empty_token_rejected(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            SyncSettings(token="", project_id="42")
        assert exc_info.value.setting_name == "FLAGMAN_TOKEN"
        assert exc_info.value.option == "--gitlab-token"
        assert "pass --gitlab-token or set FLAGMAN_TOKEN" in exc_info.value.message

    def test_empty_project_rejected(self) -> None:
        with pytest.raises(MissingRequiredSettingError):
            SyncSettings(token="t", project_id="")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"request_timeout": 0},
            {"page_size": 0},
            {"fetch_concurrency": 0},
            {"apply_concurrency": -1},
            {"base_url": "gitlab.com"},
        ],
    )
    def test_invalid_values(self, overrides: dict[str, object]) -> None:
        with pytest.raises(InvalidSettingValueError):
            SyncSettings(token="t", project_id="42", **overrides)  # type: ignore[arg-type]

    def test_repr_hides_token(self) -> None:
        text = repr(SyncSettings(token="glpat-secret", project_id="42"))
        assert "glpat-secret" not in text
        assert "[REDACTED]" in text


class TestEnvSettingsLoader:
    def test_loads_and_coerces(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLAGMAN_TOKEN", "env-token")
        monkeypatch.setenv("FLAGMAN_PROJECT_ID", "7")
        monkeypatch.setenv("FLAGMAN_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("FLAGMAN_PAGE_SIZE", "20")
        monkeypatch.setenv("FLAGMAN_DRY_RUN", "true")
        settings = EnvSettingsLoader().load(SyncSettings)
        assert settings.token == "env-token"
        assert settings.project_id == "7"
        assert settings.request_timeout == 2.5
        assert settings.page_size == 20
        assert settings.dry_run is True

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader(environ={"FLAGMAN_TOKEN": "t"}).load(SyncSettings)
        assert exc_info.value.setting_name == "FLAGMAN_PROJECT_ID"

    def test_invalid_integer(self) -> None:
        environ = {"FLAGMAN_TOKEN": "t", "FLAGMAN_PROJECT_ID": "1", "FLAGMAN_PAGE_SIZE": "lots"}
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader(environ=environ).load(SyncSettings)
        assert exc_info.value.setting_name == "FLAGMAN_PAGE_SIZE"

    def test_values_only_contains_present_keys(self) -> None:
        values = EnvSettingsLoader(environ={"FLAGMAN_PAGE_SIZE": "3"}).values(SyncSettings)
        assert values == {"page_size": 3}


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> None:
        # setenv first so monkeypatch restores whatever load_dotenv writes
        monkeypatch.setenv("FLAGMAN_TOKEN", "placeholder")
        monkeypatch.setenv("FLAGMAN_PROJECT_ID", "placeholder")
        env_file = tmp_path / ".env"
        env_file.write_text("FLAGMAN_TOKEN=dotenv-token\nFLAGMAN_PROJECT_ID=99\n", encoding="utf-8")
        settings = DotenvSettingsLoader(str(env_file), override=True).load(SyncSettings)
        assert settings.token == "dotenv-token"
        assert settings.project_id == "99"


class TestSettingsFactory:
    def test_overrides_win_over_loaders(self) -> None:
        loader = EnvSettingsLoader(environ={"FLAGMAN_TOKEN": "env", "FLAGMAN_PROJECT_ID": "1"})
        settings = SettingsFactory.create(SyncSettings, loaders=[loader], overrides={"token": "cli"})
        assert settings.token == "cli"
        assert settings.project_id == "1"

    def test_none_overrides_are_ignored(self) -> None:
        loader = EnvSettingsLoader(environ={"FLAGMAN_TOKEN": "env", "FLAGMAN_PROJECT_ID": "1"})
        settings = SettingsFactory.create(
            SyncSettings, loaders=[loader], overrides={"token": None, "page_size": None}
        )
        assert settings.token == "env"
        assert settings.page_size == 100

    def test_later_loaders_win(self) -> None:
        first = EnvSettingsLoader(environ={"FLAGMAN_TOKEN": "a", "FLAGMAN_PROJECT_ID": "1"})
        second = EnvSettingsLoader(environ={"FLAGMAN_PROJECT_ID": "2"})
        settings = SettingsFactory.create(SyncSettings, loaders=[first, second])
        assert (settings.token, settings.project_id) == ("a", "2")

    def test_missing_required_after_merge(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            SettingsFactory.create(SyncSettings, loaders=[EnvSettingsLoader(environ={})], overrides={"token": "t"})
        assert exc_info.value.setting_name == "FLAGMAN_PROJECT_ID"

    def test_validation_errors_propagate(self) -> None:
        with pytest.raises(ConfigError):
            SettingsFactory.create(SyncSettings, overrides={"token": "t", "project_id": "1", "page_size": 0})
