"""Kernel records – tolerant field access and value coercion.

Listing records arrive as whatever the API client deserialised: plain dicts,
dataclasses or arbitrary objects.  Every accessor here degrades to ``None``
instead of raising, so a malformed record simply fails to match.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import UTC, date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Union

__all__ = ["FieldRef", "get_field", "to_datetime", "to_number"]

FieldRef = Union[str, Callable[[Any], Any]]

_ACCESS_ERRORS = (LookupError, AttributeError, TypeError, ValueError)


def _step(current: Any, name: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(name)
    return getattr(current, name, None)


def get_field(record: Any, ref: FieldRef) -> Any:
    """Return the value of *ref* on *record*, or ``None`` when absent.

    *ref* is either a dotted path (``"userId.name"``) or a callable used for
    derived fields such as an effective price.
    """
    if record is None:
        return None
    if callable(ref):
        try:
            return ref(record)
        except _ACCESS_ERRORS:
            return None
    current = record
    for name in ref.split("."):
        current = _step(current, name)
        if current is None:
            return None
    return current


def to_datetime(value: Any) -> datetime | None:
    """Coerce *value* to an aware UTC ``datetime``.

    Accepts ``datetime``/``date`` instances, ISO-8601 strings (a trailing
    ``Z`` is understood) and epoch seconds.  Naive values are taken as UTC.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        result = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, UTC)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            result = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if result.tzinfo is None:
        return result.replace(tzinfo=UTC)
    return result.astimezone(UTC)


def to_number(value: Any) -> int | float | Decimal | None:
    """Coerce *value* to a number; ``bool``, ``None`` and garbage give ``None``."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if isinstance(value, Decimal):
        return None if value.is_nan() else value
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
        return None if number.is_nan() else number
    return None
