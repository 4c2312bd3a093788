"""Kernel errors — public re-export surface."""

from versioning.kernel.errors.application import ApplicationError
from versioning.kernel.errors.base import VersioningError
from versioning.kernel.errors.domain import DomainError, ValidationError

__all__ = [
    "ApplicationError",
    "DomainError",
    "ValidationError",
    "VersioningError",
]
