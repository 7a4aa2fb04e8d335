"""Unit tests for config settings loaders."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

import pytest

from labelbus.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings
from labelbus.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


# ---------------------------------------------------------------------------
# Concrete settings class used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    ratio: float = 0.5
    debug: bool = False
    floor: int | None = None
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"
    api_key: str  # no default → required


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("APP_HOST", "APP_PORT", "APP_RATIO", "APP_DEBUG", "APP_FLOOR", "APP_ALLOWED_ORIGINS", "REQ_API_KEY"):
        monkeypatch.delenv(key, raising=False)


class TestEnvSettingsLoader:
    def test_defaults_preserved_when_env_absent(self) -> None:
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings == AppSettings()

    def test_loads_scalars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("APP_RATIO", "0.25")
        settings = EnvSettingsLoader().load(AppSettings)
        assert (settings.host, settings.port, settings.ratio) == ("example.com", 9000, 0.25)

    @pytest.mark.parametrize("raw", ["true", "True", "1", "yes", "on"])
    def test_loads_bool_true(self, raw: str, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_DEBUG", raw)
        assert EnvSettingsLoader().load(AppSettings).debug is True

    @pytest.mark.parametrize("raw", ["false", "False", "0", "no", "off"])
    def test_loads_bool_false(self, raw: str, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_DEBUG", raw)
        assert EnvSettingsLoader().load(AppSettings).debug is False

    def test_loads_optional_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_FLOOR", "40")
        assert EnvSettingsLoader().load(AppSettings).floor == 40

    def test_blank_optional_is_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_FLOOR", "  ")
        assert EnvSettingsLoader().load(AppSettings).floor is None

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "http://a.com, http://b.com,")
        assert EnvSettingsLoader().load(AppSettings).allowed_origins == ["http://a.com", "http://b.com"]

    def test_bad_int_is_invalid_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "eighty")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(AppSettings)
        assert exc_info.value.setting_name == "APP_PORT"
        assert exc_info.value.value == "eighty"

    def test_bad_bool_is_invalid_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_DEBUG", "maybe")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(AppSettings)

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_API_KEY"

    def test_validation_errors_propagate(self, monkeypatch: pytest.MonkeyPatch) -> None:
        @dataclass
        class PortSettings(Settings):
            _prefix: ClassVar[str] = "APP"
            port: int = 80

            def _validate(self) -> None:
                if self.port <= 0:
                    raise InvalidSettingValueError("port", self.port, "must be positive")

        monkeypatch.setenv("APP_PORT", "-1")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(PortSettings)

    def test_other_construction_failures_become_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        @dataclass
        class FragileSettings(Settings):
            _prefix: ClassVar[str] = "APP"
            host: str = "x"

            def _validate(self) -> None:
                raise RuntimeError("unexpected")

        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(FragileSettings)


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("APP_HOST=from-dotenv\nAPP_PORT=7000\n")
        settings = DotenvSettingsLoader(str(env_file)).load(AppSettings)
        assert settings.host == "from-dotenv"
        assert settings.port == 7000

    def test_process_env_wins_without_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("APP_HOST=from-dotenv\n")
        monkeypatch.setenv("APP_HOST", "from-env")
        assert DotenvSettingsLoader(str(env_file)).load(AppSettings).host == "from-env"


class TestConfigErrors:
    def test_missing_required_setting_stores_name(self) -> None:
        err = MissingRequiredSettingError("DATABASE_URL")
        assert err.setting_name == "DATABASE_URL"
        assert err.code == "missing_required_setting"
        assert "DATABASE_URL" in str(err)

    def test_invalid_setting_value_message(self) -> None:
        err = InvalidSettingValueError("PORT", "abc", "must be an integer")
        msg = err.to_dict()["message"]
        assert "PORT" in msg
        assert "'abc'" in msg
        assert "must be an integer" in msg
        assert err.code == "invalid_setting_value"
