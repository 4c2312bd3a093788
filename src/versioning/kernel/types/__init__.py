"""Kernel value-object types — public re-export surface.

Modules:
  semantic_version.py — SemanticVersion, Ordering
"""

from versioning.kernel.types.semantic_version import Ordering, SemanticVersion

__all__ = ["Ordering", "SemanticVersion"]
