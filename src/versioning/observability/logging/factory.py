"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from versioning.config.settings.app import VersioningSettings


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


class JsonLoggerFactory:
    """Configure structlog on top of the stdlib root logger.

    ``json=False`` swaps the JSON renderer for structlog's console renderer,
    which is easier to read during local development.
    """

    @staticmethod
    def configure(level: int | str = logging.INFO, *, json: bool = True) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderers: list[Any] = (
            [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
            if json
            else [structlog.dev.ConsoleRenderer(colors=False)]
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(_resolve_level(level))

    @staticmethod
    def configure_from_settings(settings: "VersioningSettings") -> None:
        """Apply ``VERSIONING_LOG_LEVEL`` and ``VERSIONING_JSON_LOGS``."""
        JsonLoggerFactory.configure(settings.log_level_value, json=settings.json_logs)


__all__ = ["JsonLoggerFactory"]
