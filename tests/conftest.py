"""Shared pytest fixtures and the Hypothesis profile."""

from hypothesis import HealthCheck, settings

from catalog_query.testing.fixtures import admin_session, fake_clock  # noqa: F401

# product lists are slow to generate on a cold interpreter
settings.register_profile("catalog", suppress_health_check=[HealthCheck.too_slow], deadline=None)
settings.load_profile("catalog")
