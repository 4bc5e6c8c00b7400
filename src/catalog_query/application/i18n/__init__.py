"""Application i18n – locale message bundles and currency display."""
from catalog_query.application.i18n.bundle import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    ResourceBundle,
    normalize_locale,
)
from catalog_query.application.i18n.currency import (
    CURRENCIES,
    CurrencyConfig,
    convert_from_vnd,
    format_currency,
)

__all__ = [
    "CURRENCIES",
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "CurrencyConfig",
    "ResourceBundle",
    "convert_from_vnd",
    "format_currency",
    "normalize_locale",
]
