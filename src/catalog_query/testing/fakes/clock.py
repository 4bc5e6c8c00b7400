"""Testing fakes – FakeClock factory."""
from __future__ import annotations

from datetime import UTC, datetime

from catalog_query.kernel.time import FrozenClock

FAKE_NOW = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)


def FakeClock() -> FrozenClock:  # noqa: N802
    """Return a ``FrozenClock`` pinned to 2026-01-15 12:00 UTC."""
    return FrozenClock(FAKE_NOW)


__all__ = ["FAKE_NOW", "FakeClock"]
