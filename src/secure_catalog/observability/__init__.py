"""Observability – structured logging."""
from secure_catalog.observability.logging import AccessContextProcessor, JsonLoggerFactory, get_logger

__all__ = ["AccessContextProcessor", "JsonLoggerFactory", "get_logger"]
