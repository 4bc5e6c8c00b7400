"""Config settings – 12-factor env-based configuration."""
from catalog_query.config.settings.base import Settings
from catalog_query.config.settings.factory import SettingsFactory
from catalog_query.config.settings.listing import ListingSettings
from catalog_query.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ListingSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
