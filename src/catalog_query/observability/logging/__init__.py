"""Observability – structlog configuration and logger helpers."""
from catalog_query.observability.logging.factory import JsonLoggerFactory
from catalog_query.observability.logging.processors import SessionProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "SessionProcessor",
    "get_logger",
]
