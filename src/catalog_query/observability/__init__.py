"""Observability – structured logging."""

from catalog_query.observability.logging import JsonLoggerFactory, SessionProcessor, get_logger

__all__ = ["JsonLoggerFactory", "SessionProcessor", "get_logger"]
