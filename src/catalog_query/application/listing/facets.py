"""Application listing – facet counts computed from the real collection."""
from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable
from typing import Any

from catalog_query.application.filtering import date_window, in_range
from catalog_query.kernel.records import FieldRef, get_field
from catalog_query.kernel.time import Clock

__all__ = ["count_by", "count_windows"]


def count_by(records: Iterable[Any] | None, field: FieldRef) -> dict[Any, int]:
    """Count records per value of *field*, most frequent first.

    Missing and unhashable values are skipped; equal counts keep the order in
    which values were first seen.
    """
    counts: Counter[Any] = Counter()
    for record in records or ():
        value = get_field(record, field)
        if value is None or not isinstance(value, Hashable):
            continue
        counts[value] += 1
    return dict(counts.most_common())


def count_windows(
    records: Iterable[Any] | None,
    field: FieldRef,
    windows: Iterable[str],
    clock: Clock,
) -> dict[str, int]:
    """Count records whose *field* timestamp falls in each named window."""
    ranges = {name: date_window(name, clock) for name in windows}
    totals = {name: 0 for name in ranges}
    for record in records or ():
        value = get_field(record, field)
        for name, rng in ranges.items():
            if rng is not None and in_range(value, rng):
                totals[name] += 1
    return totals
