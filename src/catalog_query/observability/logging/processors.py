"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class SessionProcessor:
    """structlog processor that injects the active session into log events.

    Adds ``user_id`` and ``locale`` when a :class:`Session` is active; existing
    keys on the event are never overwritten.

    Usage::

        structlog.configure(processors=[SessionProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from catalog_query.application.session import SessionContext

        session = SessionContext.get_current()
        if session is not None:
            event_dict.setdefault("user_id", session.user_id)
            event_dict.setdefault("locale", session.locale)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["SessionProcessor", "get_logger"]
