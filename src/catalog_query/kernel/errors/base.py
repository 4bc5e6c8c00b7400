"""Root error class for the catalog-query error hierarchy."""

from __future__ import annotations

import json
from typing import Any, Protocol


class MessageLookup(Protocol):
    """Anything that resolves a message key per locale (e.g. ``ResourceBundle``)."""

    def get(self, key: str, locale: str | None = None, default: str | None = None) -> str: ...


class _KeepMissing(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error carries an English ``message`` for logs and a ``message_key``
    that the UI resolves through its message bundle, so a notice can be shown
    in Vietnamese, English or Japanese.

    Args:
        message: Human-readable description (English, for logs).
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra JSON-serialisable context.
        cause: Exception that triggered this one.
        message_key: Bundle key for the user-facing notice (defaults to
            ``errors.<code>``).
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
        message_key: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.message_key = message_key or f"errors.{self.code}"
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def localized(self, messages: MessageLookup, locale: str | None = None) -> str:
        """User-facing text for *locale*; falls back to :attr:`message`."""
        text = messages.get(self.message_key, locale, default="")
        if not text:
            return self.message
        return text.format_map(_KeepMissing(self.detail))

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "message_key": self.message_key,
            "detail": self.detail,
        }
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError", "MessageLookup"]
