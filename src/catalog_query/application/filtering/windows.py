"""Application filtering – named date windows, price brackets, status classes.

These translate the string values of listing controls ("today",
"200000-500000", "success") into :class:`Range` objects.  Anything that is
not recognised, including the ``"all"`` sentinel, maps to ``None`` so the
resulting criterion is inactive.
"""
from __future__ import annotations

import calendar
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation

from catalog_query.application.filtering.criterion import ALL, Range
from catalog_query.kernel.time import Clock, start_of_day

__all__ = [
    "DATE_WINDOWS",
    "STATUS_CLASSES",
    "date_window",
    "months_before",
    "price_bracket",
    "status_class",
]

DATE_WINDOWS: tuple[str, ...] = (
    "today",
    "thisWeek",
    "thisMonth",
    "lastMonth",
    "1d",
    "7d",
    "30d",
    "90d",
    "week",
    "month",
    "year",
)

_PERIOD_DAYS = {"1d": 1, "7d": 7, "30d": 30, "90d": 90, "week": 7, "month": 30, "year": 365}

STATUS_CLASSES: dict[str, Range] = {
    "success": Range.half_open(200, 300),
    "error": Range.at_least(400),
}


def months_before(moment: datetime, months: int) -> datetime:
    """Same day *months* calendar months earlier, clamped to the month's end."""
    index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def date_window(name: str | None, clock: Clock) -> Range | None:
    """Resolve a named date window against *clock*.

    ``lastMonth`` is the only closed window: ``[two months ago, one month
    ago)``; every other window is open-ended (``>= start``).
    """
    if not name or name == ALL:
        return None
    now = clock.now()
    if name == "today":
        return Range.at_least(start_of_day(now))
    if name == "thisWeek":
        return Range.at_least(now - timedelta(days=7))
    if name == "thisMonth":
        return Range.at_least(start_of_day(months_before(now, 1)))
    if name == "lastMonth":
        return Range.half_open(
            start_of_day(months_before(now, 2)),
            start_of_day(months_before(now, 1)),
        )
    days = _PERIOD_DAYS.get(name)
    if days is not None:
        return Range.at_least(now - timedelta(days=days))
    return None


def _amount(text: str) -> Decimal | None:
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return None
    return None if value.is_nan() else value


def price_bracket(key: str | None) -> Range | None:
    """Parse a ``"low-high"`` price bracket key.

    ``"0-200000"`` is ``< 200000``, ``"1000000-"`` is ``> 1000000``, anything
    else with two bounds is inclusive on both ends.
    """
    if not key or key == ALL or "-" not in key:
        return None
    low_text, high_text = key.split("-", 1)
    low = _amount(low_text) if low_text.strip() else None
    high = _amount(high_text) if high_text.strip() else None
    if (low_text.strip() and low is None) or (high_text.strip() and high is None):
        return None
    if high is None:
        return Range.above(low) if low is not None else None
    if low is None or low == 0:
        return Range.below(high)
    return Range.between(low, high)


def status_class(name: str | None) -> Range | None:
    if not name:
        return None
    return STATUS_CLASSES.get(name)
