"""Observability – structured logging helpers."""
from versioning.observability.logging.factory import JsonLoggerFactory
from versioning.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
