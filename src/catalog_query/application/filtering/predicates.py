"""Application filtering – predicate library.

Every predicate is a pure ``(value, criterion value) -> bool`` test.  A
missing field, a ``None`` value or an incomparable type is a non-match,
never an exception.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any, Callable

from catalog_query.application.filtering.criterion import FilterCriterion, Operator, Range
from catalog_query.kernel.records import get_field, to_datetime, to_number

__all__ = [
    "Predicate",
    "any_element",
    "build_predicate",
    "contains_text",
    "equals",
    "in_range",
    "one_of",
]

Predicate = Callable[[Any], bool]

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def equals(value: Any, expected: Any) -> bool:
    if value is None:
        return False
    return bool(value == expected)


def one_of(value: Any, allowed: Any) -> bool:
    if value is None:
        return False
    try:
        return value in allowed
    except TypeError:
        return False


def _is_temporal(bound: Any) -> bool:
    return isinstance(bound, date) or (isinstance(bound, str) and to_number(bound) is None)


def in_range(value: Any, rng: Range) -> bool:
    """``min <= value <= max`` honouring the range's inclusivity flags.

    Bounds given as dates/datetimes switch the comparison to UTC datetimes;
    otherwise both sides are compared as numbers.
    """
    if value is None:
        return False
    bound = rng.min if rng.min is not None else rng.max
    coerce = to_datetime if _is_temporal(bound) else to_number
    subject = coerce(value)
    if subject is None:
        return False
    try:
        if rng.min is not None:
            low = coerce(rng.min)
            if low is None:
                return False
            if subject < low or (subject == low and not rng.min_inclusive):
                return False
        if rng.max is not None:
            high = coerce(rng.max)
            if high is None:
                return False
            if subject > high or (subject == high and not rng.max_inclusive):
                return False
    except TypeError:
        return False
    return True


def _text_of(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def contains_text(values: Iterable[Any], query: str) -> bool:
    """Case-insensitive substring test, OR across *values*.

    List-valued fields (tags) match when any element contains the query.
    """
    needle = query.strip().lower()
    if not needle:
        return False
    for value in values:
        candidates = value if isinstance(value, _SEQUENCE_TYPES) else (value,)
        for candidate in candidates:
            text = _text_of(candidate)
            if text is not None and needle in text.lower():
                return True
    return False


def _element_texts(element: Any) -> list[str]:
    if isinstance(element, str):
        return [element]
    if isinstance(element, Mapping):
        return [v for v in (element.get("name"), element.get("value")) if isinstance(v, str)]
    return []


def any_element(values: Any, expected: Any, match: str = "equals") -> bool:
    """Set membership on an array-valued field.

    Elements may be plain strings or ``{"name": ..., "value": ...}`` swatch
    mappings.  String comparison is case-insensitive.
    """
    if not isinstance(values, _SEQUENCE_TYPES) or not values:
        return False
    if not isinstance(expected, str):
        return any(element == expected for element in values)
    wanted = expected.strip().lower()
    for element in values:
        for text in _element_texts(element):
            candidate = text.lower()
            if match == "contains" and wanted in candidate:
                return True
            if match == "equals" and wanted == candidate:
                return True
    return False


def build_predicate(criterion: FilterCriterion) -> Predicate:
    """Compile *criterion* into a single-record predicate."""
    fields = criterion.fields
    value = criterion.value
    op = criterion.op

    if op is Operator.CONTAINS:
        query = str(value)
        return lambda record: contains_text((get_field(record, f) for f in fields), query)

    field = fields[0]
    if op is Operator.EQUALS:
        return lambda record: equals(get_field(record, field), value)
    if op is Operator.RANGE:
        return lambda record: in_range(get_field(record, field), value)
    if op is Operator.ANY_OF:
        match = criterion.match
        return lambda record: any_element(get_field(record, field), value, match)
    if op is Operator.IN:
        return lambda record: one_of(get_field(record, field), value)
    raise ValueError(f"Unsupported filter operator: {op!r}")
