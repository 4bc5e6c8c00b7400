"""Testing fixtures – fake_clock."""
from __future__ import annotations

import pytest

from catalog_query.kernel.time import FrozenClock
from catalog_query.testing.fakes import FakeClock


@pytest.fixture
def fake_clock() -> FrozenClock:
    """Pytest fixture: a clock pinned to 2026-01-15 12:00 UTC."""
    return FakeClock()


__all__ = ["fake_clock"]
