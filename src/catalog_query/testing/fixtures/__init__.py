"""Testing fixtures – pytest plugin for catalog-query tests."""
from catalog_query.testing.fixtures.clock import fake_clock
from catalog_query.testing.fixtures.session import admin_session

__all__ = ["admin_session", "fake_clock"]
