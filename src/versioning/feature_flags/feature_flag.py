"""Feature flags – FeatureFlag value object and its interchange record.

The record shape is::

    {"name": "dark_mode", "description": "...", "minimumVersion": "1.2.0"}

``description`` is omitted when absent and ``minimumVersion`` is always the
full ``major.minor.patch`` form.
"""
from __future__ import annotations

import dataclasses
import json
from typing import Any, Mapping

from versioning.kernel.errors.domain import ValidationError
from versioning.kernel.types.semantic_version import SemanticVersion


@dataclasses.dataclass(frozen=True, slots=True)
class FeatureFlag:
    """A named capability available from ``minimum_version`` onwards.

    ``minimum_version`` also accepts a version string; an empty
    ``description`` is stored as ``None``.
    """

    name: str
    minimum_version: SemanticVersion
    description: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.minimum_version, (SemanticVersion, str)):
            raise ValidationError(
                f"Invalid minimum version for feature {self.name!r}: {self.minimum_version!r}",
                errors=[
                    {
                        "field": "minimum_version",
                        "reason": "must be a SemanticVersion or a version string",
                        "value": self.minimum_version,
                    }
                ],
            )
        object.__setattr__(self, "minimum_version", SemanticVersion.coerce(self.minimum_version))
        if not self.description:
            object.__setattr__(self, "description", None)

    def to_dict(self) -> dict[str, Any]:
        record: dict[str, Any] = {"name": self.name}
        if self.description is not None:
            record["description"] = self.description
        record["minimumVersion"] = str(self.minimum_version)
        return record

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FeatureFlag":
        """Build a flag from an interchange record.

        Raises :class:`ValidationError` listing every offending field when
        ``name`` or ``minimumVersion`` is missing or not a string, or when
        ``description`` is neither a string nor ``None``.
        """
        errors: list[dict[str, Any]] = []
        for key in ("name", "minimumVersion"):
            if not isinstance(data.get(key), str):
                errors.append({"field": key, "reason": "required string"})
        description = data.get("description")
        if description is not None and not isinstance(description, str):
            errors.append({"field": "description", "reason": "must be a string or null"})
        if errors:
            raise ValidationError("Malformed feature flag record", errors=errors)
        return cls(
            name=data["name"],
            minimum_version=SemanticVersion.parse(data["minimumVersion"]),
            description=description,
        )

    @classmethod
    def from_json(cls, payload: str | bytes) -> "FeatureFlag":
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ValidationError("Feature flag payload is not valid JSON", cause=exc) from exc
        if not isinstance(data, dict):
            raise ValidationError("Feature flag payload must be a JSON object")
        return cls.from_dict(data)


__all__ = ["FeatureFlag"]
