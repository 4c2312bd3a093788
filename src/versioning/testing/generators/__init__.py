"""Testing generators – Hypothesis strategies."""
from versioning.testing.generators.strategies import (
    feature_flag_strategy,
    semantic_version_strategy,
    version_string_strategy,
)

__all__ = [
    "feature_flag_strategy",
    "semantic_version_strategy",
    "version_string_strategy",
]
