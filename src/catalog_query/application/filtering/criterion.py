"""Application filtering – FilterCriterion, Operator and Range value objects."""
from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

from catalog_query.kernel.records import FieldRef

__all__ = ["ALL", "FilterCriterion", "Operator", "Range"]

ALL = "all"
"""Sentinel control value meaning "this filter is inactive"."""


class Operator(str, Enum):
    EQUALS = "eq"
    RANGE = "range"
    CONTAINS = "contains"
    ANY_OF = "any_of"
    IN = "in"


@dataclass(frozen=True)
class Range:
    """Numeric or date interval; either bound may be omitted.

    The inclusivity flags make the interval semantics a property of the
    criterion: ``Range.at_least(start)`` is the open ``>= start`` test used by
    most date windows, ``Range.half_open(start, end)`` the ``[start, end)``
    test used by "last month".
    """

    min: Any = None
    max: Any = None
    min_inclusive: bool = True
    max_inclusive: bool = True

    @property
    def is_unbounded(self) -> bool:
        return self.min is None and self.max is None

    @classmethod
    def between(cls, low: Any, high: Any) -> "Range":
        return cls(low, high)

    @classmethod
    def at_least(cls, start: Any) -> "Range":
        return cls(min=start)

    @classmethod
    def above(cls, start: Any) -> "Range":
        return cls(min=start, min_inclusive=False)

    @classmethod
    def below(cls, end: Any) -> "Range":
        return cls(max=end, max_inclusive=False)

    @classmethod
    def half_open(cls, start: Any, end: Any) -> "Range":
        return cls(min=start, max=end, max_inclusive=False)


@dataclass(frozen=True)
class FilterCriterion:
    """A single (field, operator, value) filter input from one UI control.

    *field* may be a tuple of field references; for ``CONTAINS`` the query
    matches when any of them contains it.  For ``ANY_OF`` *match* selects
    element equality or case-insensitive substring matching.
    """

    field: FieldRef | tuple[FieldRef, ...]
    op: Operator
    value: Any
    match: Literal["equals", "contains"] = "equals"

    @property
    def fields(self) -> tuple[FieldRef, ...]:
        if isinstance(self.field, tuple):
            return self.field
        return (self.field,)

    @property
    def is_active(self) -> bool:
        value = self.value
        if value is None:
            return False
        if isinstance(value, str):
            text = value.strip()
            return bool(text) and text.lower() != ALL
        if isinstance(value, Range):
            return not value.is_unbounded
        if isinstance(value, Collection):
            return len(value) > 0
        return True

    # Factories ---------------------------------------------------------
    @classmethod
    def equals(cls, field: FieldRef, value: Any) -> "FilterCriterion":
        return cls(field, Operator.EQUALS, value)

    @classmethod
    def in_range(
        cls,
        field: FieldRef,
        low: Any = None,
        high: Any = None,
    ) -> "FilterCriterion":
        return cls(field, Operator.RANGE, Range(low, high))

    @classmethod
    def within(cls, field: FieldRef, rng: Range | None) -> "FilterCriterion":
        return cls(field, Operator.RANGE, rng)

    @classmethod
    def search(cls, query: str, fields: tuple[FieldRef, ...] | list[FieldRef]) -> "FilterCriterion":
        return cls(tuple(fields), Operator.CONTAINS, query)

    @classmethod
    def any_of(
        cls,
        field: FieldRef,
        value: Any,
        *,
        match: Literal["equals", "contains"] = "equals",
    ) -> "FilterCriterion":
        return cls(field, Operator.ANY_OF, value, match=match)

    @classmethod
    def one_of(cls, field: FieldRef, values: Collection[Any]) -> "FilterCriterion":
        return cls(field, Operator.IN, frozenset(values))
