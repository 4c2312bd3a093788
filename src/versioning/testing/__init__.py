"""Testing support – fakes, fixtures and property-based generators.

Import in your ``conftest.py``::

    pytest_plugins = ["versioning.testing.fixtures"]
"""

from versioning.testing.fakes import RecordingObserver
from versioning.testing.generators import (
    feature_flag_strategy,
    semantic_version_strategy,
    version_string_strategy,
)

__all__ = [
    "RecordingObserver",
    "feature_flag_strategy",
    "semantic_version_strategy",
    "version_string_strategy",
]
