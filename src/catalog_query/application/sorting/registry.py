"""Application sorting – named comparator registry.

Comparators follow the ``cmp`` convention (negative, zero, positive) and are
applied through :func:`functools.cmp_to_key`, so sorting stays stable: ties
keep their input order.  Records missing the sort field always sort after
the records that have it, whatever the direction.
"""
from __future__ import annotations

import functools
import unicodedata
from collections.abc import Iterable
from enum import Enum
from typing import Any, Callable, TypeVar

from catalog_query.kernel.records import FieldRef, get_field, to_datetime, to_number

T = TypeVar("T")

__all__ = [
    "Comparator",
    "DEFAULT_REGISTRY",
    "ComparatorRegistry",
    "SortKey",
    "collation_key",
    "field_comparator",
    "get_comparator",
    "identity",
    "sort_records",
]

Comparator = Callable[[Any, Any], int]


class SortKey(str, Enum):
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    NAME = "name"
    NEWEST = "newest"
    OLDEST = "oldest"


def identity(a: Any, b: Any) -> int:  # noqa: ARG001
    return 0


def collation_key(value: Any) -> tuple[str, str] | None:
    """Accent- and case-insensitive sort key with the raw text as tie-break."""
    if not isinstance(value, str):
        return None
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), value


def field_comparator(
    field: FieldRef,
    coerce: Callable[[Any], Any],
    *,
    descending: bool = False,
) -> Comparator:
    """Build a comparator over ``coerce(record[field])``."""

    def compare(a: Any, b: Any) -> int:
        x = coerce(get_field(a, field))
        y = coerce(get_field(b, field))
        if x is None or y is None:
            # missing values last in both directions
            return (x is None) - (y is None)
        try:
            result = (x > y) - (x < y)
        except TypeError:
            return 0
        return -result if descending else result

    return compare


def _key_name(key: str | SortKey) -> str:
    return key.value if isinstance(key, SortKey) else key


class ComparatorRegistry:
    """Maps a closed set of sort keys to comparators.

    Unknown keys resolve to :func:`identity`, leaving input order unchanged.
    """

    def __init__(
        self,
        *,
        price_field: FieldRef = "price",
        name_field: FieldRef = "name",
        created_field: FieldRef = "createdAt",
    ) -> None:
        self._comparators: dict[str, Comparator] = {}
        self.register(SortKey.PRICE_LOW, field_comparator(price_field, to_number))
        self.register(SortKey.PRICE_HIGH, field_comparator(price_field, to_number, descending=True))
        self.register(SortKey.NAME, field_comparator(name_field, collation_key))
        self.register(SortKey.NEWEST, field_comparator(created_field, to_datetime, descending=True))
        self.register(SortKey.OLDEST, field_comparator(created_field, to_datetime))

    def register(self, key: str | SortKey, comparator: Comparator) -> None:
        self._comparators[_key_name(key)] = comparator

    def get(self, key: str | SortKey | None) -> Comparator:
        if key is None:
            return identity
        return self._comparators.get(_key_name(key), identity)

    def keys(self) -> list[str]:
        return list(self._comparators)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _key_name(key) in self._comparators

    def sort(self, records: Iterable[T] | None, key: str | SortKey | None) -> list[T]:
        """Return a new list of *records* ordered by *key* (stable)."""
        if records is None:
            return []
        comparator = self.get(key)
        if comparator is identity:
            return list(records)
        return sorted(records, key=functools.cmp_to_key(comparator))


DEFAULT_REGISTRY = ComparatorRegistry()


def get_comparator(key: str | SortKey | None) -> Comparator:
    return DEFAULT_REGISTRY.get(key)


def sort_records(
    records: Iterable[T] | None,
    key: str | SortKey | None,
    registry: ComparatorRegistry | None = None,
) -> list[T]:
    return (registry or DEFAULT_REGISTRY).sort(records, key)
