"""VersioningError – root of every error raised by this library.

Parsing and flag lookups are total, so errors only surface at the edges:
building a value from bad components, decoding a malformed flag record, or
loading invalid settings.
"""

from __future__ import annotations

import json
from typing import Any


class VersioningError(Exception):
    """Base error carrying a stable ``code`` plus structured ``detail``.

    ``str()`` renders the JSON form of :meth:`to_dict` so the error can be
    dropped straight into a structlog event.
    """

    default_code: str = "versioning.error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["VersioningError"]
