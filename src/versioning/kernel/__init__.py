"""Kernel – framework-agnostic building blocks."""

from versioning.kernel.errors import (
    ApplicationError,
    DomainError,
    ValidationError,
    VersioningError,
)
from versioning.kernel.types import Ordering, SemanticVersion

__all__ = [
    "ApplicationError",
    "DomainError",
    "Ordering",
    "SemanticVersion",
    "ValidationError",
    "VersioningError",
]
