"""Feature flags – UserOverrideManager."""
from __future__ import annotations

import threading

from versioning.observability.logging import get_logger

logger = get_logger(__name__)


class UserOverrideManager:
    """Explicit on/off overrides keyed by feature name.

    Names are not checked against any registry, so an override may be set
    before its feature is registered.
    """

    def __init__(self) -> None:
        self._overrides: dict[str, bool] = {}
        self._lock = threading.Lock()

    @property
    def overrides(self) -> dict[str, bool]:
        """Snapshot copy of every override currently set."""
        with self._lock:
            return dict(self._overrides)

    def set_override(self, name: str, enabled: bool) -> None:
        with self._lock:
            self._overrides[name] = enabled
        logger.debug("feature_override.set", feature=name, enabled=enabled)

    def clear_override(self, name: str) -> None:
        """Remove the override for *name*; a no-op when none is set."""
        with self._lock:
            removed = self._overrides.pop(name, None)
        if removed is not None:
            logger.debug("feature_override.cleared", feature=name)

    def get_override(self, name: str) -> bool | None:
        with self._lock:
            return self._overrides.get(name)


__all__ = ["UserOverrideManager"]
