"""Application-layer errors — configuration and wiring concerns."""

from __future__ import annotations

from versioning.kernel.errors.base import VersioningError


class ApplicationError(VersioningError):
    """Cross-cutting application-layer concern."""

    default_code = "versioning.application"


__all__ = ["ApplicationError"]
