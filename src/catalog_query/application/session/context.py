"""Application session – SessionContext using contextvars."""

from __future__ import annotations

import contextvars

from catalog_query.application.session.session import Session
from catalog_query.kernel.errors import ForbiddenError, UnauthorizedError

_VAR: contextvars.ContextVar[Session | None] = contextvars.ContextVar(
    "_session_context", default=None
)


class SessionContext:
    """Store and retrieve the current :class:`Session` via :mod:`contextvars`.

    The session is set once at login (:meth:`start`), read by every protected
    listing, and invalidated explicitly with :meth:`end`.
    """

    @staticmethod
    def get_current() -> Session | None:
        """Return the current session, or ``None`` if absent."""
        return _VAR.get()

    @staticmethod
    def start(session: Session) -> contextvars.Token[Session | None]:
        """Set the current session and return a reset token."""
        return _VAR.set(session)

    @staticmethod
    def end() -> None:
        """Invalidate the current session."""
        _VAR.set(None)

    @staticmethod
    def require() -> Session:
        """Return the current session or raise ``UnauthorizedError``."""
        session = _VAR.get()
        if session is None:
            raise UnauthorizedError("No active session")
        return session

    @staticmethod
    def require_admin() -> Session:
        """Return the current session if it carries an admin role."""
        session = SessionContext.require()
        if not session.is_admin:
            raise ForbiddenError("Admin role required", role="admin")
        return session


__all__ = ["SessionContext"]
