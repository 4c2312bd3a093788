"""Domain errors — invalid values and malformed records."""

from __future__ import annotations

from typing import Any

from versioning.kernel.errors.base import VersioningError


class DomainError(VersioningError):
    """Raised when a domain rule is violated."""

    default_code = "versioning.domain"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures, each a dict
    with at least ``field`` and ``reason`` keys.
    """

    default_code = "versioning.validation"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = ["DomainError", "ValidationError"]
