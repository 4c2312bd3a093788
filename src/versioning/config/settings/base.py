"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass read field-by-field from ``<_prefix>_<FIELD>`` variables.

    Subclasses declare typed fields (``str``, ``int``, ``float``, ``bool`` or
    ``list[str]``) and may override :meth:`_validate`, which runs after
    ``__init__`` and may normalise values in place.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass


__all__ = ["Settings"]
