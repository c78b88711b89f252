"""Observability – structured logging helpers."""
from secure_catalog.observability.logging.factory import JsonLoggerFactory
from secure_catalog.observability.logging.processors import AccessContextProcessor, get_logger

__all__ = [
    "AccessContextProcessor",
    "JsonLoggerFactory",
    "get_logger",
]
