"""Config – 12-factor settings and loaders."""

from catalog_query.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ListingSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from catalog_query.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "ListingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
