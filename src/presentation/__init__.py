"""Presentation — локализованный текст цен для UI.

- PricingPresenter: цена с периодом, налоговая заметка по юрисдикции
- SymbolLocaleFormatter / TerminologyResolver: реализации по умолчанию
- compute_localized_price: конверсия валюты + налог региона
- resolve_locale: выбор локали запроса
"""

from .locale_formatter import KM_PER_MILE, SymbolLocaleFormatter, TerminologyResolver
from .locale_resolution import (
    determine_locale,
    locale_context,
    parse_accept_language,
    resolve_locale,
)
from .localized_pricing import LocalizedPrice, compute_localized_price
from .price_display import (
    DEFAULT_DISPLAY_PERIOD,
    PresenterConfig,
    PricingPresenter,
    TaxAssessment,
)
from .protocols import LocaleFormatter, TextResolver

__all__ = [
    "DEFAULT_DISPLAY_PERIOD",
    "KM_PER_MILE",
    "LocaleFormatter",
    "LocalizedPrice",
    "PresenterConfig",
    "PricingPresenter",
    "SymbolLocaleFormatter",
    "TaxAssessment",
    "TerminologyResolver",
    "TextResolver",
    "compute_localized_price",
    "determine_locale",
    "locale_context",
    "parse_accept_language",
    "resolve_locale",
]
