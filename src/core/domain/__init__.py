"""
Domain models and value objects.

Contains fundamental domain entities like Money, LocaleInfo, TaxRule.
"""

from src.core.domain.locale import (
    COUNTRY_LOCALE_MAP,
    CURRENCY_SYMBOLS,
    DEFAULT_LOCALE,
    LOCALE_CONFIG,
    LocaleInfo,
    SupportedLocale,
    UnsupportedLocaleError,
    get_locale_info,
)
from src.core.domain.money import Money
from src.core.domain.tax import (
    DEFAULT_TAX_RULES,
    GB_VAT_LABEL,
    GB_VAT_RATE,
    US_SALES_TAX_RATE,
    US_TAX_LABEL,
    TaxPolicy,
    TaxRule,
    TaxRuleTable,
    freeze_tax_rules,
)

__all__ = [
    # Money
    "Money",
    # Locale profiles
    "COUNTRY_LOCALE_MAP",
    "CURRENCY_SYMBOLS",
    "DEFAULT_LOCALE",
    "LOCALE_CONFIG",
    "LocaleInfo",
    "SupportedLocale",
    "UnsupportedLocaleError",
    "get_locale_info",
    # Tax rules
    "DEFAULT_TAX_RULES",
    "GB_VAT_LABEL",
    "GB_VAT_RATE",
    "US_SALES_TAX_RATE",
    "US_TAX_LABEL",
    "TaxPolicy",
    "TaxRule",
    "TaxRuleTable",
    "freeze_tax_rules",
]
