"""Unit tests for kernel time utilities."""

from __future__ import annotations

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

from catalog_query.kernel.time import FrozenClock, SystemClock, start_of_day, utc_now

_SAIGON = ZoneInfo("Asia/Ho_Chi_Minh")


class TestSystemClock:
    def test_now_is_utc_by_default(self) -> None:
        assert SystemClock().now().utcoffset().total_seconds() == 0

    def test_now_in_store_timezone(self) -> None:
        clock = SystemClock(_SAIGON)
        assert clock.tz is _SAIGON
        assert clock.now().utcoffset().total_seconds() == 7 * 3600

    def test_today_returns_date(self) -> None:
        result = SystemClock().today()
        assert isinstance(result, date)
        assert not isinstance(result, datetime)

    def test_utc_now(self) -> None:
        assert utc_now().tzinfo == UTC


class TestFrozenClock:
    def test_now_is_fixed(self) -> None:
        fixed = datetime(2026, 1, 1, tzinfo=UTC)
        clk = FrozenClock(fixed)
        assert clk.now() == fixed
        assert clk.now() == fixed

    def test_naive_datetime_made_utc(self) -> None:
        assert FrozenClock(datetime(2026, 1, 1)).now().tzinfo == UTC

    def test_tz_keeps_the_instant(self) -> None:
        clk = FrozenClock(datetime(2026, 1, 14, 20, 0, tzinfo=UTC), tz=_SAIGON)
        assert clk.now() == datetime(2026, 1, 14, 20, 0, tzinfo=UTC)
        assert clk.today() == date(2026, 1, 15)

    def test_advance(self) -> None:
        clk = FrozenClock(datetime(2026, 1, 1, tzinfo=UTC))
        clk.advance(days=2, hours=3)
        assert clk.now() == datetime(2026, 1, 3, 3, tzinfo=UTC)
        assert clk.today() == date(2026, 1, 3)


class TestStartOfDay:
    def test_local_midnight(self) -> None:
        moment = datetime(2026, 1, 15, 9, 30, tzinfo=_SAIGON)
        assert start_of_day(moment) == datetime(2026, 1, 15, tzinfo=_SAIGON)
        assert start_of_day(moment) == datetime(2026, 1, 14, 17, 0, tzinfo=UTC)
