"""Kernel time – Clock port + implementations."""
from catalog_query.kernel.time.clock import Clock, FrozenClock, SystemClock, start_of_day, utc_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "start_of_day", "utc_now"]
