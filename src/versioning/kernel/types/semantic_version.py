"""SemanticVersion value object.

Versions compare on their *normalised* form: trailing zero components are
dropped, so ``1.2``, ``1.2.0`` and ``SemanticVersion(1, 2)`` are the same
value, while ``1.2.1`` is strictly greater.  Rendering always spells out the
full ``major.minor.patch`` triple.
"""

from __future__ import annotations

import dataclasses
import re
from enum import IntEnum
from typing import Final

from versioning.kernel.errors.domain import ValidationError

_COMPONENT_PATTERN: Final = re.compile(r"[0-9]+")
_COMPONENT_COUNT: Final = 3


class Ordering(IntEnum):
    """Result of :meth:`SemanticVersion.compare`."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _parse_component(raw: str) -> int:
    if not _COMPONENT_PATTERN.fullmatch(raw):
        return 0
    try:
        return int(raw)
    except ValueError:
        # over the interpreter's int/str digit limit
        return 0


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class SemanticVersion:
    """Immutable ``major.minor.patch`` triple of non-negative integers."""

    major: int
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        errors = [
            {"field": name, "reason": "must be a non-negative integer", "value": value}
            for name, value in (
                ("major", self.major),
                ("minor", self.minor),
                ("patch", self.patch),
            )
            if isinstance(value, bool) or not isinstance(value, int) or value < 0
        ]
        if errors:
            raise ValidationError(
                f"Invalid semantic version components: {self.major!r}.{self.minor!r}.{self.patch!r}",
                errors=errors,
            )

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        """Parse a dot-delimited version string.  Never raises.

        Only the first three segments are read; a segment that is not made of
        ASCII digits (including an empty one) counts as ``0`` and missing
        segments default to ``0``.  ``"1.two.3"`` is ``1.0.3``, ``""`` is
        ``0.0.0`` and ``"1.2.3.4.5"`` is ``1.2.3``.
        """
        segments = text.strip().split(".")[:_COMPONENT_COUNT]
        components = [_parse_component(segment) for segment in segments]
        components.extend([0] * (_COMPONENT_COUNT - len(components)))
        return cls(*components)

    @classmethod
    def coerce(cls, value: "SemanticVersion | str") -> "SemanticVersion":
        """Return *value* unchanged, or parse it when given as a string."""
        if isinstance(value, SemanticVersion):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise ValidationError(
            f"Cannot build a SemanticVersion from {type(value).__name__}",
            errors=[{"field": "value", "reason": "must be a SemanticVersion or a version string"}],
        )

    def normalized(self) -> tuple[int, ...]:
        """Components with trailing zeros stripped: ``(1, 2, 0)`` -> ``(1, 2)``."""
        components = [self.major, self.minor, self.patch]
        while components and components[-1] == 0:
            components.pop()
        return tuple(components)

    def equals(self, other: "SemanticVersion") -> bool:
        return self.normalized() == other.normalized()

    def compare(self, other: "SemanticVersion") -> Ordering:
        """Compare normalised forms position by position, padding with zeros."""
        left, right = self.normalized(), other.normalized()
        for index in range(max(len(left), len(right))):
            a = left[index] if index < len(left) else 0
            b = right[index] if index < len(right) else 0
            if a != b:
                return Ordering.LESS if a < b else Ordering.GREATER
        return Ordering.EQUAL

    def to_string(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.normalized())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS


__all__ = ["Ordering", "SemanticVersion"]
