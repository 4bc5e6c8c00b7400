"""Kernel – errors, clock and record field access shared by every layer."""

from catalog_query.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from catalog_query.kernel.records import get_field, to_datetime, to_number
from catalog_query.kernel.time import Clock, FrozenClock, SystemClock, utc_now

__all__ = [
    "ApplicationError",
    "BaseError",
    "Clock",
    "DomainError",
    "ForbiddenError",
    "FrozenClock",
    "NotFoundError",
    "SystemClock",
    "UnauthorizedError",
    "ValidationError",
    "get_field",
    "to_datetime",
    "to_number",
    "utc_now",
]
