"""Unit tests for config settings & loaders."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Iterator

import pytest

from versioning.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
    VersioningSettings,
)
from versioning.kernel.types import SemanticVersion

_VERSIONING_KEYS = (
    "VERSIONING_CURRENT_VERSION",
    "VERSIONING_LOG_LEVEL",
    "VERSIONING_JSON_LOGS",
    "VERSIONING_ENABLED_FEATURES",
    "VERSIONING_DISABLED_FEATURES",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in _VERSIONING_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for key in _VERSIONING_KEYS:
        os.environ.pop(key, None)


@dataclass
class SampleSettings(Settings):
    _prefix: ClassVar[str] = "SAMPLE"

    retries: int = 3
    ratio: float = 0.5
    tags: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_required_version(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VERSIONING_CURRENT_VERSION", "2.3.1")
        settings = EnvSettingsLoader().load(VersioningSettings)
        assert settings.current_version == "2.3.1"
        assert settings.version == SemanticVersion(2, 3, 1)

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as info:
            EnvSettingsLoader().load(VersioningSettings)
        assert info.value.setting_name == "VERSIONING_CURRENT_VERSION"

    def test_defaults_preserved(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VERSIONING_CURRENT_VERSION", "1")
        settings = EnvSettingsLoader().load(VersioningSettings)
        assert settings.log_level == "INFO"
        assert settings.json_logs is True
        assert settings.enabled_features == []
        assert settings.disabled_features == []

    def test_loads_lists(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VERSIONING_CURRENT_VERSION", "1")
        monkeypatch.setenv("VERSIONING_ENABLED_FEATURES", "beta, search,,")
        monkeypatch.setenv("VERSIONING_DISABLED_FEATURES", "legacy")
        settings = EnvSettingsLoader().load(VersioningSettings)
        assert settings.enabled_features == ["beta", "search"]
        assert settings.disabled_features == ["legacy"]

    @pytest.mark.parametrize(("raw", "expected"), [("true", True), ("1", True), ("off", False), ("no", False)])
    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
        monkeypatch.setenv("VERSIONING_CURRENT_VERSION", "1")
        monkeypatch.setenv("VERSIONING_JSON_LOGS", raw)
        assert EnvSettingsLoader().load(VersioningSettings).json_logs is expected

    def test_loads_numbers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SAMPLE_RETRIES", "7")
        monkeypatch.setenv("SAMPLE_RATIO", "0.25")
        monkeypatch.setenv("SAMPLE_TAGS", "a,b")
        settings = EnvSettingsLoader().load(SampleSettings)
        assert (settings.retries, settings.ratio, settings.tags) == (7, 0.25, ["a", "b"])

    def test_uncoercible_value_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SAMPLE_RETRIES", "many")
        with pytest.raises(InvalidSettingValueError) as info:
            EnvSettingsLoader().load(SampleSettings)
        assert info.value.setting_name == "SAMPLE_RETRIES"

    def test_validation_error_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VERSIONING_CURRENT_VERSION", "1")
        monkeypatch.setenv("VERSIONING_LOG_LEVEL", "LOUD")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(VersioningSettings)


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_loads_from_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("VERSIONING_CURRENT_VERSION=4.2\nVERSIONING_LOG_LEVEL=debug\n")
        settings = DotenvSettingsLoader(str(env_file)).load(VersioningSettings)
        assert settings.version == SemanticVersion(4, 2)
        assert settings.log_level == "DEBUG"

    def test_environment_wins_without_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("VERSIONING_CURRENT_VERSION=4.2\n")
        monkeypatch.setenv("VERSIONING_CURRENT_VERSION", "5")
        settings = DotenvSettingsLoader(str(env_file)).load(VersioningSettings)
        assert settings.version == SemanticVersion(5)


# ---------------------------------------------------------------------------
# VersioningSettings validation
# ---------------------------------------------------------------------------


class TestVersioningSettings:
    def test_log_level_is_upper_cased(self) -> None:
        settings = VersioningSettings(current_version="1", log_level="warning")
        assert settings.log_level == "WARNING"
        assert settings.log_level_value == 30

    def test_unknown_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            VersioningSettings(current_version="1", log_level="chatty")

    def test_conflicting_overrides(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            VersioningSettings(
                current_version="1",
                enabled_features=["a", "b"],
                disabled_features=["b"],
            )
        assert info.value.value == ["b"]

    def test_config_errors_share_base(self) -> None:
        assert issubclass(InvalidSettingValueError, ConfigError)

    def test_version_parsing_is_total(self) -> None:
        assert VersioningSettings(current_version="v1.x").version == SemanticVersion(0)

    def test_oversized_version_segment_degrades_to_zero(self) -> None:
        settings = VersioningSettings(current_version="2." + "1" * 5_000)
        assert settings.version == SemanticVersion(2)
