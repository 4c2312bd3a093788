"""Feature flags – FeatureRegistry."""
from __future__ import annotations

import threading

from versioning.feature_flags.feature_flag import FeatureFlag
from versioning.kernel.types.semantic_version import SemanticVersion
from versioning.observability.logging import get_logger

logger = get_logger(__name__)


class FeatureRegistry:
    """Flag definitions keyed by name, gated on the running application version.

    ``current_version`` is fixed for the lifetime of the registry.  Registering
    a name that already exists replaces the earlier definition.
    """

    def __init__(self, current_version: SemanticVersion | str) -> None:
        self._current_version = SemanticVersion.coerce(current_version)
        self._flags: dict[str, FeatureFlag] = {}
        self._lock = threading.Lock()

    @property
    def current_version(self) -> SemanticVersion:
        return self._current_version

    def register_feature(self, flag: FeatureFlag) -> None:
        with self._lock:
            replaced = flag.name in self._flags
            self._flags[flag.name] = flag
        logger.debug(
            "feature_flag.registered",
            feature=flag.name,
            minimum_version=str(flag.minimum_version),
            replaced=replaced,
        )

    def is_feature_available(self, name: str) -> bool:
        """``False`` for unknown names, otherwise ``current_version >= minimum_version``."""
        with self._lock:
            flag = self._flags.get(name)
        if flag is None:
            return False
        return self._current_version >= flag.minimum_version

    def get_feature(self, name: str) -> FeatureFlag | None:
        with self._lock:
            return self._flags.get(name)

    def get_all_features(self) -> list[FeatureFlag]:
        with self._lock:
            return list(self._flags.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._flags)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._flags


__all__ = ["FeatureRegistry"]
