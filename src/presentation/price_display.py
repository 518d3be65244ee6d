"""PricingPresenter — текст цены и налоговой заметки для UI

Чистые операции без side effects:
- format_display_price: "$12.50/day"
- format_tax_note: "Includes VAT" / "Plus $8.75 tax" / None

Правила налога (DEFAULT_TAX_RULES, сопоставление юрисдикции case-sensitive):
- GB → INCLUSIVE: только метка "Includes VAT", сумма не вычисляется
- US → ADDITIVE: tax = amount * 0.0875, "Plus {formatted tax} tax"
- прочие → None (UI-элемент не рендерится вовсе)

Форматирование чисел, группировка и символ валюты полностью делегируются
LocaleFormatter. Суммы не валидируются (отрицательные, ноль, очень большие
передаются форматтеру как есть); конечность amount: precondition вызывающего.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from src.core.domain.tax import DEFAULT_TAX_RULES, TaxPolicy, TaxRule
from src.core.math.pricing_math import estimate_additive_tax
from src.presentation.protocols import LocaleFormatter, TextResolver


DEFAULT_DISPLAY_PERIOD = "day"


# =============================================================================
# CONFIG / RESULT
# =============================================================================


@dataclass(frozen=True)
class PresenterConfig:
    """Конфигурация PricingPresenter."""

    period_separator: str = "/"

    # Заметка для ADDITIVE правил: {amount} форматированный налог, {label} метка
    additive_note_template: str = "Plus {amount} {label}"


@dataclass(frozen=True)
class TaxAssessment:
    """Решение по налогу для одной юрисдикции."""

    jurisdiction: str
    policy: TaxPolicy
    rate: float

    # None для INCLUSIVE (сумма не вычисляется)
    tax_amount: Optional[float]

    # Текст для UI
    note: str


# =============================================================================
# PRESENTER
# =============================================================================


class PricingPresenter:
    """Презентер цен.

    Коллабораторы передаются явно (constructor injection), глобального
    состояния нет. Таблица правил и форматтер только читаются.
    """

    def __init__(
        self,
        formatter: LocaleFormatter,
        resolver: TextResolver,
        tax_rules: Mapping[str, TaxRule] = DEFAULT_TAX_RULES,
        config: Optional[PresenterConfig] = None,
    ):
        self._formatter = formatter
        self._resolver = resolver
        self._tax_rules = tax_rules
        self._config = config or PresenterConfig()

    @property
    def tax_rules(self) -> Mapping[str, TaxRule]:
        return self._tax_rules

    def format_display_price(
        self,
        amount: float,
        currency: Optional[str] = None,
        period: str = DEFAULT_DISPLAY_PERIOD,
        show_period: bool = True,
    ) -> str:
        """Текст цены с опциональным периодом.

        Args:
            amount: сумма (конечное число, не валидируется)
            currency: явная валюта; None → валюта форматтера по умолчанию
            period: ключ периода ("day", "week"), резолвится через TextResolver
            show_period: False → суффикс периода не добавляется

        Returns:
            "{formatted price}/{period text}" или "{formatted price}"
        """
        effective_currency = currency or self._formatter.currency
        formatted_price = self._formatter.format_price(amount, currency=effective_currency)

        if not show_period:
            return formatted_price

        period_text = self._resolver.t(period)
        return f"{formatted_price}{self._config.period_separator}{period_text}"

    def assess_tax(
        self,
        jurisdiction: str,
        amount: float,
        currency: Optional[str] = None,
    ) -> Optional[TaxAssessment]:
        """Структурированное решение по налогу.

        Args:
            jurisdiction: код региона, точное совпадение с таблицей
            amount: сумма, от которой считалась цена
            currency: валюта для форматирования налога; None → по умолчанию

        Returns:
            TaxAssessment или None для нераспознанной юрисдикции
        """
        rule = self._tax_rules.get(jurisdiction)
        if rule is None:
            return None

        if rule.policy == TaxPolicy.INCLUSIVE:
            return TaxAssessment(
                jurisdiction=jurisdiction,
                policy=rule.policy,
                rate=rule.rate,
                tax_amount=None,
                note=rule.label,
            )

        tax = estimate_additive_tax(amount, rule.rate)
        effective_currency = currency or self._formatter.currency
        note = self._config.additive_note_template.format(
            amount=self._formatter.format_price(tax, currency=effective_currency),
            label=rule.label,
        )
        return TaxAssessment(
            jurisdiction=jurisdiction,
            policy=rule.policy,
            rate=rule.rate,
            tax_amount=tax,
            note=note,
        )

    def format_tax_note(
        self,
        jurisdiction: str,
        amount: float,
        currency: Optional[str] = None,
    ) -> Optional[str]:
        """Налоговая заметка или None (не "", элемент UI опускается)."""
        assessment = self.assess_tax(jurisdiction, amount, currency=currency)
        if assessment is None:
            return None
        return assessment.note
