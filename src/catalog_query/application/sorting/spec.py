"""Application sorting – explicit field/direction sort specification.

Mirrors the ``sortBy``/``sortOrder`` query parameters accepted by the admin
listing endpoints, for callers that sort on an arbitrary field instead of a
named key.
"""
from __future__ import annotations

import dataclasses
from datetime import date
from enum import Enum
from typing import Any

from catalog_query.application.sorting.registry import Comparator, collation_key, field_comparator
from catalog_query.kernel.records import to_datetime, to_number

__all__ = ["SortDirection", "SortSpec", "comparator_for", "natural_key"]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class SortSpec:
    """Single sort criterion."""
    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, field: str, order: str | None = None) -> "SortSpec":
        """Build from request-style values; anything but ``desc`` is ascending."""
        direction = SortDirection.DESC if (order or "").strip().lower() == "desc" else SortDirection.ASC
        return cls(field, direction)


def natural_key(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str):
        return collation_key(value)
    if isinstance(value, date):
        return to_datetime(value)
    return to_number(value)


def comparator_for(spec: SortSpec) -> Comparator:
    return field_comparator(
        spec.field,
        natural_key,
        descending=spec.direction is SortDirection.DESC,
    )
