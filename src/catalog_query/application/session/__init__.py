"""Application session – explicit session state for protected listings."""
from catalog_query.application.session.context import SessionContext
from catalog_query.application.session.session import ADMIN_ROLES, Session

__all__ = ["ADMIN_ROLES", "Session", "SessionContext"]
