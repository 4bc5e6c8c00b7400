"""Kernel time – clocks carrying "now" and the store timezone.

Date windows ("today", "last month") are computed from ``clock.now()``, so
they start at midnight of the clock's timezone.  Record timestamps are
compared as aware datetimes, whatever zone they were written in.
"""
from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, tzinfo
from typing import Protocol


class Clock(Protocol):
    """Port: source of the current instant."""

    def now(self) -> datetime: ...
    def today(self) -> date: ...


def start_of_day(moment: datetime) -> datetime:
    """Midnight of *moment*'s calendar day, in *moment*'s own timezone."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


class SystemClock:
    """Wall clock reporting aware datetimes in *tz* (UTC by default)."""

    def __init__(self, tz: tzinfo = UTC) -> None:
        self._tz = tz

    @property
    def tz(self) -> tzinfo:
        return self._tz

    def now(self) -> datetime:
        return datetime.now(self._tz)

    def today(self) -> date:
        return self.now().date()


class FrozenClock:
    """Clock pinned to one instant.

    A naive *fixed* value is read as UTC; *tz* re-expresses the instant in
    another zone without moving it.
    """

    def __init__(self, fixed: datetime, tz: tzinfo | None = None) -> None:
        if fixed.tzinfo is None:
            fixed = fixed.replace(tzinfo=UTC)
        self._fixed = fixed.astimezone(tz) if tz is not None else fixed

    def now(self) -> datetime:
        return self._fixed

    def today(self) -> date:
        return self._fixed.date()

    def advance(self, **kwargs: float) -> None:
        self._fixed += timedelta(**kwargs)


def utc_now() -> datetime:
    return datetime.now(UTC)


__all__ = ["Clock", "FrozenClock", "SystemClock", "start_of_day", "utc_now"]
