"""Application resources – ResourceSchema and FilterBinding.

A schema describes one admin listing (products, activity logs, API logs ...)
once: which fields free-text search covers, which UI control feeds which
criterion, and how the named sort keys resolve.  Every listing page then
shares the same filter/sort/projection code path.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from catalog_query.application.filtering import (
    ALL,
    FilterCriterion,
    Range,
    date_window,
    price_bracket,
    status_class,
)
from catalog_query.application.listing import ListingQuery
from catalog_query.application.resources.defaults import ListingDefaults
from catalog_query.application.sorting import DEFAULT_REGISTRY, ComparatorRegistry, SortSpec
from catalog_query.kernel.errors import ValidationError
from catalog_query.kernel.records import FieldRef, to_number
from catalog_query.kernel.time import Clock

__all__ = ["BindingKind", "FilterBinding", "ResourceSchema"]

BindingKind = Literal[
    "equals",
    "number",
    "minimum",
    "flag",
    "price_bracket",
    "date_window",
    "status_class",
    "any_of",
    "choice",
]

_TRUE = frozenset({"true", "1", "yes"})
_FALSE = frozenset({"false", "0", "no"})


def _is_inactive(raw: Any) -> bool:
    if raw is None:
        return True
    if isinstance(raw, str):
        return not raw.strip() or raw.strip().lower() == ALL
    return False


@dataclass(frozen=True)
class FilterBinding:
    """How one UI control value turns into a :class:`FilterCriterion`.

    ``choice`` bindings map each control value to a prepared criterion (role
    status "active" / "system" ...); unknown choices are ignored.
    """

    field: FieldRef
    kind: BindingKind = "equals"
    match: Literal["equals", "contains"] = "equals"
    choices: Mapping[str, FilterCriterion] = field(default_factory=dict)

    def to_criterion(self, raw: Any, clock: Clock) -> FilterCriterion | None:  # noqa: PLR0911
        if _is_inactive(raw):
            return None
        text = raw.strip() if isinstance(raw, str) else raw
        match self.kind:
            case "equals":
                return FilterCriterion.equals(self.field, text)
            case "number":
                number = to_number(text)
                return FilterCriterion.equals(self.field, number) if number is not None else None
            case "minimum":
                number = to_number(text)
                return FilterCriterion.within(self.field, Range.at_least(number)) if number is not None else None
            case "flag":
                if isinstance(text, bool):
                    return FilterCriterion.equals(self.field, text)
                flag = str(text).lower()
                if flag in _TRUE:
                    return FilterCriterion.equals(self.field, True)
                if flag in _FALSE:
                    return FilterCriterion.equals(self.field, False)
                return None
            case "price_bracket":
                return FilterCriterion.within(self.field, price_bracket(str(text)))
            case "date_window":
                return FilterCriterion.within(self.field, date_window(str(text), clock))
            case "status_class":
                return FilterCriterion.within(self.field, status_class(str(text)))
            case "any_of":
                return FilterCriterion.any_of(self.field, text, match=self.match)
            case "choice":
                return self.choices.get(str(text))
        return None


def _int_param(params: Mapping[str, Any], name: str) -> int | None:
    raw = params.get(name)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError.for_field(name, raw, f"{name} must be an integer", cause=exc) from exc


@dataclass(frozen=True)
class ResourceSchema:
    """Listing description for one resource type."""

    name: str
    search_fields: tuple[FieldRef, ...] = ()
    filters: Mapping[str, FilterBinding] = field(default_factory=dict)
    registry: ComparatorRegistry = DEFAULT_REGISTRY
    id_field: str = "_id"
    default_sort: str | None = None

    def criteria_from_params(self, params: Mapping[str, Any], clock: Clock) -> list[FilterCriterion]:
        """Translate UI control values into criteria; unknown controls are ignored."""
        criteria: list[FilterCriterion] = []
        for control, binding in self.filters.items():
            criterion = binding.to_criterion(params.get(control), clock)
            if criterion is not None and criterion.is_active:
                criteria.append(criterion)
        return criteria

    def query_from_params(
        self,
        params: Mapping[str, Any],
        clock: Clock,
        defaults: ListingDefaults | None = None,
    ) -> ListingQuery:
        """Build a :class:`ListingQuery` from request-style parameters.

        Recognised keys: ``q``/``search``, ``sort`` (named key),
        ``sortBy``/``sortOrder`` (explicit field), ``offset``, ``limit`` and
        ``page`` (1-based; without ``limit`` the default page size applies),
        plus the filter controls.  ``limit`` is capped at the maximum page size.
        """
        defaults = defaults or ListingDefaults()
        search = params.get("q") or params.get("search") or ""
        sort_by = params.get("sortBy")
        sort = SortSpec.parse(sort_by, params.get("sortOrder")) if sort_by else None
        limit = defaults.cap(_int_param(params, "limit"))
        offset = _int_param(params, "offset")
        page = _int_param(params, "page")
        if page is not None and limit is None:
            limit = defaults.page_size
        if offset is None:
            offset = (page - 1) * limit if page is not None and limit is not None and page > 0 else 0
        return ListingQuery(
            search=str(search),
            criteria=tuple(self.criteria_from_params(params, clock)),
            sort_key=params.get("sort") or self.default_sort or defaults.default_sort,
            sort=sort,
            offset=offset,
            limit=limit,
        )
