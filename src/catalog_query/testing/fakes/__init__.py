"""Testing fakes – deterministic doubles and sample records."""
from catalog_query.testing.fakes.clock import FAKE_NOW, FakeClock
from catalog_query.testing.fakes.records import make_activity, make_product

__all__ = ["FAKE_NOW", "FakeClock", "make_activity", "make_product"]
