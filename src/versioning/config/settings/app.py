"""Config settings – VersioningSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from versioning.config.settings.base import Settings
from versioning.config.validation import InvalidSettingValueError
from versioning.kernel.types.semantic_version import SemanticVersion

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class VersioningSettings(Settings):
    """Settings read from ``VERSIONING_*`` variables.

    ``enabled_features`` / ``disabled_features`` are comma-separated names
    forced on or off through overrides at start-up.
    """

    _prefix: ClassVar[str] = "VERSIONING"

    current_version: str
    log_level: str = "INFO"
    json_logs: bool = True
    enabled_features: list[str] = dataclasses.field(default_factory=list)
    disabled_features: list[str] = dataclasses.field(default_factory=list)

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )
        conflicting = set(self.enabled_features) & set(self.disabled_features)
        if conflicting:
            raise InvalidSettingValueError(
                "enabled_features",
                sorted(conflicting),
                "features cannot be both enabled and disabled",
            )

    @property
    def version(self) -> SemanticVersion:
        return SemanticVersion.parse(self.current_version)

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["VersioningSettings"]
