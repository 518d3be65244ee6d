"""Реализации LocaleFormatter / TextResolver по умолчанию

Работают от профиля LocaleInfo (en-US / en-GB):
- SymbolLocaleFormatter: символ валюты + 2 знака + группировка тысяч
- TerminologyResolver: терминология профиля, fallback на сам ключ

Форматы:
    1234.5, USD  → "$1,234.50"
    -5, USD      → "-$5.00"
    10, CHF      → "CHF 10.00"  (неизвестный символ → код + пробел)
"""

from typing import Mapping, Optional

from src.core.domain.locale import CURRENCY_SYMBOLS, LocaleInfo, get_locale_info


# Миль → км
KM_PER_MILE = 1.60934


class SymbolLocaleFormatter:
    """Форматтер сумм и расстояний для профиля локали."""

    def __init__(
        self,
        locale_info: LocaleInfo,
        symbols: Mapping[str, str] = CURRENCY_SYMBOLS,
    ):
        self._locale_info = locale_info
        self._symbols = symbols

    @classmethod
    def for_locale(cls, locale: str) -> "SymbolLocaleFormatter":
        """Форматтер для поддерживаемой локали ("en-US", "en-GB")."""
        return cls(get_locale_info(locale))

    @property
    def locale_info(self) -> LocaleInfo:
        return self._locale_info

    @property
    def currency(self) -> str:
        return self._locale_info.currency

    def format_price(self, amount: float, currency: Optional[str] = None) -> str:
        """
        Форматирование суммы.

        Args:
            amount: Сумма (знак сохраняется, минус перед символом)
            currency: Код валюты; None → валюта локали

        Returns:
            Текст суммы, например "$1,234.50" или "£8.75"
        """
        code = (currency or self.currency).upper()
        digits = f"{abs(amount):,.2f}"
        symbol = self._symbols.get(code)
        sign = "-" if amount < 0 and digits.strip("0.,") else ""

        if symbol:
            return f"{sign}{symbol}{digits}"
        return f"{sign}{code} {digits}"

    def format_distance(self, distance_miles: float) -> str:
        """
        Расстояние в единицах локали.

        Args:
            distance_miles: Расстояние в милях

        Returns:
            "1.2 miles" / "1.9 km"
        """
        unit = self._locale_info.distance_unit
        value = distance_miles * KM_PER_MILE if unit == "km" else distance_miles
        return f"{value:.1f} {unit}"


class TerminologyResolver:
    """TextResolver на базе таблицы терминологии."""

    def __init__(self, terminology: Mapping[str, str]):
        self._terminology = dict(terminology)

    @classmethod
    def for_locale(cls, locale: str) -> "TerminologyResolver":
        return cls(get_locale_info(locale).terminology)

    def t(self, key: str) -> str:
        # Непереведённый ключ возвращается как есть
        return self._terminology.get(key) or key
