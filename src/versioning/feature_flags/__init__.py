"""Feature flags – version-gated flags, overrides and change notification."""
from versioning.feature_flags.events import EnabledFeaturesChanged, Observer, Subscription
from versioning.feature_flags.feature_flag import FeatureFlag
from versioning.feature_flags.flags import FeatureFlags
from versioning.feature_flags.overrides import UserOverrideManager
from versioning.feature_flags.registry import FeatureRegistry

__all__ = [
    "EnabledFeaturesChanged",
    "FeatureFlag",
    "FeatureFlags",
    "FeatureRegistry",
    "Observer",
    "Subscription",
    "UserOverrideManager",
]
