"""
versioning – semantic versions and version-gated feature flags.

Import path convention::

    from versioning.kernel.types import SemanticVersion
    from versioning.feature_flags import FeatureFlag, FeatureFlags
    from versioning.config import EnvSettingsLoader, VersioningSettings
"""

from versioning.feature_flags import FeatureFlag, FeatureFlags
from versioning.kernel.types import SemanticVersion

__version__ = "0.1.0"
__all__ = ["FeatureFlag", "FeatureFlags", "SemanticVersion", "__version__"]
