"""Config settings – environment and ``.env`` loaders."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from dotenv import dotenv_values

from catalog_query.config.settings.base import Settings
from catalog_query.config.validation import InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


def _parse_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


_PARSERS: dict[str, Callable[[str], Any]] = {
    "bool": _parse_bool,
    "int": int,
    "float": float,
    "list": _parse_list,
    "str": str,
}


def _type_name(hint: Any) -> str:
    # annotations arrive as strings under ``from __future__ import annotations``
    if isinstance(hint, str):
        return hint.split("[", 1)[0].strip()
    origin = getattr(hint, "__origin__", None) or hint
    return getattr(origin, "__name__", "")


class SettingsLoader(abc.ABC):
    """Port: read settings values from one source."""

    @abc.abstractmethod
    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        """Return the coerced values this source provides; absent fields are omitted."""

    def load(self, settings_class: type[T]) -> T:
        found = self.values(settings_class)
        for name in settings_class.required_fields():
            if name not in found:
                raise MissingRequiredSettingError(settings_class.env_key(name))
        return settings_class.from_values(found)


class EnvSettingsLoader(SettingsLoader):
    """Reads ``<PREFIX>_<FIELD>`` variables from *environ* (``os.environ`` by default)."""

    def __init__(self, environ: Mapping[str, str | None] | None = None) -> None:
        self._environ = environ

    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        found: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            key = settings_class.env_key(field.name)
            raw = environ.get(key)
            if raw is None:
                continue
            parse = _PARSERS.get(_type_name(field.type), str)
            try:
                found[field.name] = parse(raw)
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc
        return found


class DotenvSettingsLoader(SettingsLoader):
    """Reads a ``.env`` file layered with the process environment.

    The process environment wins unless *override* is set.  ``os.environ``
    itself is never modified.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        file_values = dotenv_values(self._env_file)
        if self._override:
            merged = {**os.environ, **file_values}
        else:
            merged = {**file_values, **os.environ}
        return EnvSettingsLoader(merged).values(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
