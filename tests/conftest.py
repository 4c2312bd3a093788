"""Shared pytest configuration – exposes the versioning testing fixtures."""

from versioning.testing.fixtures import feature_flags_factory, recording_observer  # noqa: F401
