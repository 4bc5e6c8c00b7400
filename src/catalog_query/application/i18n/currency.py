"""Application i18n – storefront currency display.

Prices are stored in VND and converted for display with fixed rates.
"""
from __future__ import annotations

import dataclasses
from decimal import ROUND_HALF_UP, Decimal
from typing import Literal

from catalog_query.application.i18n.bundle import DEFAULT_LOCALE, normalize_locale

__all__ = ["CURRENCIES", "CurrencyConfig", "convert_from_vnd", "format_currency"]


@dataclasses.dataclass(frozen=True)
class CurrencyConfig:
    code: str
    symbol: str
    rate: Decimal  # units per 1 VND
    position: Literal["before", "after"]
    group_separator: str


CURRENCIES: dict[str, CurrencyConfig] = {
    "vi": CurrencyConfig("VND", "₫", Decimal("1"), "after", "."),
    "en": CurrencyConfig("USD", "$", Decimal("0.000041"), "before", ","),
    "ja": CurrencyConfig("JPY", "¥", Decimal("6.1"), "before", ","),
}


def _config(locale: str | None) -> CurrencyConfig:
    return CURRENCIES.get(normalize_locale(locale), CURRENCIES[DEFAULT_LOCALE])


def convert_from_vnd(amount: int | float | Decimal, locale: str | None = DEFAULT_LOCALE) -> Decimal:
    return Decimal(str(amount)) * _config(locale).rate


def format_currency(amount: int | float | Decimal, locale: str | None = DEFAULT_LOCALE) -> str:
    """``1250000`` → ``"1.250.000 ₫"`` (vi), ``"$51"`` (en), ``"¥7,625,000"`` (ja).

    NaN and infinite amounts render as ``""``.
    """
    config = _config(locale)
    converted = convert_from_vnd(amount, locale)
    if not converted.is_finite():
        return ""
    whole = converted.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    number = f"{abs(whole):,.0f}".replace(",", config.group_separator)
    if whole < 0:
        number = "-" + number
    if config.position == "before":
        return f"{config.symbol}{number}"
    return f"{number} {config.symbol}"
