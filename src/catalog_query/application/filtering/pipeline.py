"""Application filtering – FilterPipeline and apply_filters."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from catalog_query.application.filtering.criterion import FilterCriterion
from catalog_query.application.filtering.predicates import Predicate, build_predicate

T = TypeVar("T")

__all__ = ["FilterPipeline", "apply_filters"]


class FilterPipeline(Generic[T]):
    """Conjunction of the active criteria.

    Inactive criteria (``None``, blank, the ``"all"`` sentinel, unbounded
    ranges) are dropped at construction and never evaluated.
    """

    def __init__(self, criteria: Iterable[FilterCriterion] = ()) -> None:
        self._active: tuple[FilterCriterion, ...] = tuple(c for c in criteria if c.is_active)
        self._predicates: tuple[Predicate, ...] = tuple(build_predicate(c) for c in self._active)

    @property
    def active(self) -> tuple[FilterCriterion, ...]:
        return self._active

    def __len__(self) -> int:
        return len(self._predicates)

    def matches(self, record: Any) -> bool:
        # all() stops at the first failing predicate
        return all(predicate(record) for predicate in self._predicates)

    def apply(self, records: Iterable[T] | None) -> list[T]:
        """Return a fresh list of the records that pass every active predicate."""
        if records is None:
            return []
        if not self._predicates:
            return list(records)
        return [record for record in records if self.matches(record)]


def apply_filters(
    records: Iterable[T] | None,
    criteria: Iterable[FilterCriterion] = (),
) -> list[T]:
    """Filter *records* by the conjunction of *criteria*."""
    return FilterPipeline(criteria).apply(records)
