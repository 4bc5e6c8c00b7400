"""Testing support – fakes, fixtures and Hypothesis strategies.

Import in your ``conftest.py``::

    pytest_plugins = ["catalog_query.testing.fixtures"]

The strategies live in :mod:`catalog_query.testing.generators` and require
the ``test`` extra (``hypothesis``).
"""

from catalog_query.testing.fakes import FakeClock, make_activity, make_product

__all__ = ["FakeClock", "make_activity", "make_product"]
