"""Config settings – SettingsFactory."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from catalog_query.config.settings.base import Settings
from catalog_query.config.settings.loaders import SettingsLoader
from catalog_query.config.validation.errors import ConfigError, MissingRequiredSettingError
from catalog_query.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

logger = get_logger(__name__)


class SettingsFactory:
    """Layer several loaders and explicit overrides into one settings object.

    Later loaders win over earlier ones, *overrides* win over every loader.
    Only values a source actually provides take part in the merge, so a later
    loader never resets an earlier value back to its default.  A loader that
    fails with :class:`ConfigError` is skipped and logged.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> T:
        """Build *settings_cls*.

        Raises
        ------
        MissingRequiredSettingError
            A field without default is provided by no source.
        ConfigError
            A value is invalid or construction failed.
        """
        merged: dict[str, Any] = {}
        for loader in loaders or ():
            try:
                merged.update(loader.values(settings_cls))
            except ConfigError as exc:
                logger.warning("settings.loader_skipped", loader=type(loader).__name__, error=exc.message)
        merged.update(overrides or {})

        missing = [name for name in settings_cls.required_fields() if name not in merged]
        if missing:
            raise MissingRequiredSettingError(missing[0])

        settings = settings_cls.from_values(merged)
        logger.debug("settings.created", settings=settings_cls.__name__, sources=len(loaders or ()))
        return settings


__all__ = ["SettingsFactory"]
