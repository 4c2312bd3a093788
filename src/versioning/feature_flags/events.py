"""Feature flags – change notification for the enabled set."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Literal

from versioning.feature_flags.feature_flag import FeatureFlag

ChangeReason = Literal["initial", "registered", "override_set", "override_cleared"]


@dataclass(frozen=True)
class EnabledFeaturesChanged:
    """Published after every mutation of a :class:`FeatureFlags` instance.

    ``previous`` and ``current`` are the enabled sets before and after the
    mutation; ``feature`` names the flag the mutation targeted (``None`` for
    the ``"initial"`` replay delivered on subscribe).
    """

    reason: ChangeReason
    previous: tuple[FeatureFlag, ...]
    current: tuple[FeatureFlag, ...]
    feature: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def added(self) -> frozenset[str]:
        return frozenset(f.name for f in self.current) - {f.name for f in self.previous}

    @property
    def removed(self) -> frozenset[str]:
        return frozenset(f.name for f in self.previous) - {f.name for f in self.current}

    @property
    def changed(self) -> bool:
        return self.previous != self.current


Observer = Callable[[EnabledFeaturesChanged], None]


class Subscription:
    """Handle returned by :meth:`FeatureFlags.subscribe`.

    Cancel explicitly or use as a context manager::

        with flags.subscribe(render):
            flags.set_feature_override("beta", True)
    """

    def __init__(self, observer: Observer, unsubscribe: Callable[["Subscription"], None]) -> None:
        self._observer = observer
        self._unsubscribe = unsubscribe
        self._active = True

    @property
    def observer(self) -> Observer:
        return self._observer

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if self._active:
            self._active = False
            self._unsubscribe(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc: object) -> None:
        self.cancel()


__all__ = ["ChangeReason", "EnabledFeaturesChanged", "Observer", "Subscription"]
