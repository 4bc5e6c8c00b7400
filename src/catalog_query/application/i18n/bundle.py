"""Application i18n – ResourceBundle: locale → message key → text."""
from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from catalog_query.kernel.errors import ValidationError

__all__ = ["DEFAULT_LOCALE", "SUPPORTED_LOCALES", "ResourceBundle", "normalize_locale"]

SUPPORTED_LOCALES: tuple[str, ...] = ("vi", "en", "ja")
DEFAULT_LOCALE = "vi"


def normalize_locale(locale: str | None) -> str:
    """``"en-US"`` / ``"en_GB"`` → ``"en"``; empty → ``""``."""
    if not locale:
        return ""
    return locale.replace("_", "-").split("-", 1)[0].lower()


class ResourceBundle:
    """Message lookup with a default-locale fallback.

    Resolution order for :meth:`get`: the requested locale, its language
    prefix, the default locale, the caller's *default*, then the key itself.

    Example::

        bundle = ResourceBundle({"vi": {"search": "Tìm kiếm"}, "en": {"search": "Search"}})
        bundle.get("search", "en-US")  # "Search"
        bundle.get("search", "ja")     # "Tìm kiếm"
    """

    def __init__(
        self,
        messages: Mapping[str, Mapping[str, str]] | None = None,
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        self._messages: dict[str, dict[str, str]] = {
            locale: dict(table) for locale, table in (messages or {}).items()
        }
        self._default_locale = default_locale

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def locales(self) -> list[str]:
        return sorted(self._messages)

    def _candidates(self, locale: str | None) -> list[str]:
        out: list[str] = []
        for candidate in (locale, normalize_locale(locale), self._default_locale):
            if candidate and candidate not in out:
                out.append(candidate)
        return out

    def has(self, key: str, locale: str) -> bool:
        return key in self._messages.get(locale, {})

    def get(self, key: str, locale: str | None = None, default: str | None = None) -> str:
        for candidate in self._candidates(locale):
            table = self._messages.get(candidate)
            if table is not None and key in table:
                return table[key]
        return default if default is not None else key

    def format(self, key: str, locale: str | None = None, **values: Any) -> str:
        return self.get(key, locale).format(**values)

    def merge(self, other: "ResourceBundle") -> "ResourceBundle":
        """Return a new bundle where *other*'s messages override this one's."""
        merged: dict[str, dict[str, str]] = {k: dict(v) for k, v in self._messages.items()}
        for locale, table in other._messages.items():
            merged.setdefault(locale, {}).update(table)
        return ResourceBundle(merged, self._default_locale)

    @classmethod
    def from_json(cls, path: str | Path, default_locale: str = DEFAULT_LOCALE) -> "ResourceBundle":
        """Load ``{"vi": {...}, "en": {...}}`` from a UTF-8 JSON file."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
            raise ValidationError(f"Resource bundle {str(path)!r} must map locales to objects")
        return cls(data, default_locale)
