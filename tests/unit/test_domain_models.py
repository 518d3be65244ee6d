"""
Tests for pricing domain models

Покрывает:
- Money: конечность суммы, формат кода валюты, immutability
- TaxRule: диапазон ставки, enum политики
- DEFAULT_TAX_RULES: состав таблицы и read-only
- LocaleInfo / LOCALE_CONFIG: профили en-US / en-GB
"""

import math

import pytest
from pydantic import ValidationError

from src.core.domain import (
    COUNTRY_LOCALE_MAP,
    CURRENCY_SYMBOLS,
    DEFAULT_TAX_RULES,
    LOCALE_CONFIG,
    LocaleInfo,
    Money,
    SupportedLocale,
    TaxPolicy,
    TaxRule,
    UnsupportedLocaleError,
    get_locale_info,
)


class TestMoney:
    """Тесты Money"""

    def test_valid(self) -> None:
        money = Money(amount=12.5, currency="USD")
        assert money.amount == 12.5
        assert money.currency == "USD"

    def test_negative_and_zero_allowed(self) -> None:
        assert Money(amount=-3.0, currency="GBP").amount == -3.0
        assert Money(amount=0.0, currency="GBP").amount == 0.0

    @pytest.mark.parametrize("amount", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, amount) -> None:
        with pytest.raises(ValidationError):
            Money(amount=amount, currency="USD")

    @pytest.mark.parametrize("currency", ["", "usd", "US", "USDT"])
    def test_bad_currency_rejected(self, currency) -> None:
        with pytest.raises(ValidationError):
            Money(amount=1.0, currency=currency)

    def test_frozen(self) -> None:
        money = Money(amount=1.0, currency="USD")
        with pytest.raises(ValidationError):
            money.amount = 2.0


class TestTaxRule:
    """Тесты TaxRule"""

    def test_from_strings(self) -> None:
        rule = TaxRule.model_validate({"policy": "additive", "rate": 0.05, "label": "tax"})
        assert rule.policy == TaxPolicy.ADDITIVE
        assert rule.is_inclusive is False

    @pytest.mark.parametrize("rate", [-0.01, 1.01])
    def test_rate_bounds(self, rate) -> None:
        with pytest.raises(ValidationError):
            TaxRule(policy=TaxPolicy.ADDITIVE, rate=rate, label="tax")

    def test_empty_label_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TaxRule(policy=TaxPolicy.INCLUSIVE, rate=0.2, label="")


class TestDefaultTaxRules:
    """Таблица по умолчанию"""

    def test_two_jurisdictions(self) -> None:
        assert set(DEFAULT_TAX_RULES) == {"GB", "US"}

    def test_gb_inclusive(self) -> None:
        rule = DEFAULT_TAX_RULES["GB"]
        assert rule.is_inclusive
        assert rule.label == "Includes VAT"

    def test_us_additive_rate(self) -> None:
        rule = DEFAULT_TAX_RULES["US"]
        assert rule.policy == TaxPolicy.ADDITIVE
        assert rule.rate == 0.0875

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_TAX_RULES["FR"] = DEFAULT_TAX_RULES["GB"]


class TestLocaleConfig:
    """Профили локалей"""

    def test_profiles(self) -> None:
        us = LOCALE_CONFIG[SupportedLocale.EN_US]
        gb = LOCALE_CONFIG[SupportedLocale.EN_GB]

        assert (us.currency, us.region, us.distance_unit) == ("USD", "US", "miles")
        assert (gb.currency, gb.region, gb.distance_unit) == ("GBP", "GB", "km")
        assert us.terminology["parking_lot"] == "parking lot"
        assert gb.terminology["parking_lot"] == "car park"

    def test_country_aliases(self) -> None:
        assert COUNTRY_LOCALE_MAP["UK"] == SupportedLocale.EN_GB

    def test_symbols(self) -> None:
        assert CURRENCY_SYMBOLS["GBP"] == "£"
        assert CURRENCY_SYMBOLS["EUR"] == "€"

    def test_get_locale_info_by_string(self) -> None:
        assert get_locale_info("en-GB") is LOCALE_CONFIG[SupportedLocale.EN_GB]

    def test_get_locale_info_unsupported(self) -> None:
        with pytest.raises(UnsupportedLocaleError):
            get_locale_info("en-AU")

    def test_locale_info_validation(self) -> None:
        with pytest.raises(ValidationError):
            LocaleInfo(
                locale="en-AU",
                currency="AUD",
                region="AU",
                timezone="Australia/Sydney",
                date_format="DD/MM/YYYY",
                time_format=13,
                distance_unit="km",
            )
