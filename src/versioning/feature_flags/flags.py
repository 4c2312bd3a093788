"""Feature flags – FeatureFlags façade.

Composes a :class:`FeatureRegistry` with a :class:`UserOverrideManager`.
An override, when present, decides a feature verbatim; otherwise the
registry's version gate does.  Every mutator recomputes the cached enabled
set and publishes it to subscribers before returning.
"""
from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from versioning.feature_flags.events import (
    ChangeReason,
    EnabledFeaturesChanged,
    Observer,
    Subscription,
)
from versioning.feature_flags.feature_flag import FeatureFlag
from versioning.feature_flags.overrides import UserOverrideManager
from versioning.feature_flags.registry import FeatureRegistry
from versioning.kernel.types.semantic_version import SemanticVersion
from versioning.observability.logging import get_logger

if TYPE_CHECKING:
    from versioning.config.settings.app import VersioningSettings

logger = get_logger(__name__)


class FeatureFlags:
    """Version-gated feature flags with user overrides.

    Usage::

        flags = FeatureFlags("2.1")
        flags.register_feature(FeatureFlag("dark_mode", "2.0"))
        flags.subscribe(lambda event: print(sorted(event.added)))
        flags.set_feature_override("dark_mode", False)
        assert flags.enabled_features == []
    """

    def __init__(self, current_version: SemanticVersion | str) -> None:
        self._registry = FeatureRegistry(current_version)
        self._overrides = UserOverrideManager()
        self._subscriptions: list[Subscription] = []
        self._lock = threading.RLock()
        self._enabled: tuple[FeatureFlag, ...] = self._compute_enabled()

    @classmethod
    def from_settings(cls, settings: "VersioningSettings") -> "FeatureFlags":
        """Build from settings, applying the configured forced on/off overrides."""
        flags = cls(settings.version)
        for name in settings.enabled_features:
            flags.set_feature_override(name, True)
        for name in settings.disabled_features:
            flags.set_feature_override(name, False)
        return flags

    @property
    def current_version(self) -> SemanticVersion:
        return self._registry.current_version

    @property
    def enabled_features(self) -> list[FeatureFlag]:
        """Enabled set as of the last mutation."""
        with self._lock:
            return list(self._enabled)

    @property
    def overrides(self) -> dict[str, bool]:
        return self._overrides.overrides

    def register_feature(self, flag: FeatureFlag) -> None:
        with self._lock:
            self._registry.register_feature(flag)
            self._refresh("registered", flag.name)

    def is_feature_enabled(self, name: str) -> bool:
        override = self._overrides.get_override(name)
        if override is not None:
            return override
        return self._registry.is_feature_available(name)

    def set_feature_override(self, name: str, enabled: bool) -> None:
        with self._lock:
            self._overrides.set_override(name, enabled)
            self._refresh("override_set", name)

    def clear_feature_override(self, name: str) -> None:
        with self._lock:
            self._overrides.clear_override(name)
            self._refresh("override_cleared", name)

    def get_all_features(self) -> list[FeatureFlag]:
        return self._registry.get_all_features()

    def subscribe(self, observer: Observer, *, replay: bool = True) -> Subscription:
        """Register *observer* for :class:`EnabledFeaturesChanged` events.

        With ``replay`` the observer immediately receives the current enabled
        set as an ``"initial"`` event.
        """
        subscription = Subscription(observer, self._unsubscribe)
        with self._lock:
            self._subscriptions.append(subscription)
            if replay:
                self._notify(
                    [observer],
                    EnabledFeaturesChanged(reason="initial", previous=(), current=self._enabled),
                )
        return subscription

    def _unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            self._subscriptions = [s for s in self._subscriptions if s is not subscription]

    def _compute_enabled(self) -> tuple[FeatureFlag, ...]:
        return tuple(
            flag for flag in self._registry.get_all_features() if self.is_feature_enabled(flag.name)
        )

    def _refresh(self, reason: ChangeReason, feature: str) -> None:
        previous = self._enabled
        self._enabled = self._compute_enabled()
        event = EnabledFeaturesChanged(
            reason=reason,
            previous=previous,
            current=self._enabled,
            feature=feature,
        )
        logger.debug(
            "enabled_features.published",
            reason=reason,
            feature=feature,
            enabled=[f.name for f in self._enabled],
        )
        self._notify([s.observer for s in self._subscriptions], event)

    def _notify(self, observers: list[Observer], event: EnabledFeaturesChanged) -> None:
        for observer in observers:
            try:
                observer(event)
            except Exception:  # noqa: BLE001 – keep notifying the remaining observers
                logger.exception(
                    "enabled_features.observer_failed",
                    observer=getattr(observer, "__qualname__", repr(observer)),
                    reason=event.reason,
                )


__all__ = ["FeatureFlags"]
