"""Testing fixtures – pytest fixtures for feature flags.

Enable with ``pytest_plugins = ["versioning.testing.fixtures"]``.
"""
from versioning.testing.fixtures.feature_flags import (
    feature_flags_factory,
    recording_observer,
)

__all__ = ["feature_flags_factory", "recording_observer"]
