"""Config settings – Settings base class.

Each dataclass field maps to the environment variable ``<PREFIX>_<FIELD>``,
e.g. ``ListingSettings.top_n`` is read from ``LISTING_TOP_N``.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from catalog_query.config.validation.errors import ConfigError

S = TypeVar("S", bound="Settings")


@dataclasses.dataclass
class Settings:
    """Base class for environment-driven settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Cross-field checks; raise ``InvalidSettingValueError``."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def required_fields(cls) -> list[str]:
        return [
            f.name
            for f in dataclasses.fields(cls)
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        ]

    @classmethod
    def from_values(cls: type[S], values: Mapping[str, Any]) -> S:
        """Construct from already-coerced *values*, wrapping unexpected failures."""
        try:
            return cls(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {cls.__name__}: {exc}", cause=exc) from exc

    def as_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


__all__ = ["Settings"]
