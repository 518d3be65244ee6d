"""TaxRule — правила отображения налога по юрисдикциям

Две политики:
- INCLUSIVE: сумма уже содержит налог, показывается только метка (label)
- ADDITIVE: сумма без налога, оценка налога = amount * rate показывается отдельно

Таблица правил: статическая конфигурация. Расширение на новые юрисдикции:
изменение данных (DEFAULT_TAX_RULES или JSON-файл), не логики.
"""

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from pydantic import BaseModel, Field


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Средняя ставка sales tax в US (фиксированное приближение, не расчёт по штату)
US_SALES_TAX_RATE: Final[float] = 0.0875

# UK VAT, уже включён в цену
GB_VAT_RATE: Final[float] = 0.20

GB_VAT_LABEL: Final[str] = "Includes VAT"
US_TAX_LABEL: Final[str] = "tax"


# =============================================================================
# ENUMS
# =============================================================================


class TaxPolicy(str, Enum):
    """Политика отображения налога."""

    INCLUSIVE = "inclusive"
    ADDITIVE = "additive"


# =============================================================================
# MODELS
# =============================================================================


class TaxRule(BaseModel):
    """Правило для одной юрисдикции.

    label:
    - INCLUSIVE → полный текст раскрытия ("Includes VAT")
    - ADDITIVE → название налога в заметке ("Plus $8.75 tax")
    """

    policy: TaxPolicy = Field(..., description="inclusive / additive")
    rate: float = Field(..., ge=0.0, le=1.0, description="Ставка налога [0, 1]")
    label: str = Field(..., min_length=1, description="Метка налога")

    model_config = {"frozen": True}

    @property
    def is_inclusive(self) -> bool:
        return self.policy == TaxPolicy.INCLUSIVE


# Юрисдикция (case-sensitive) → правило
TaxRuleTable = Mapping[str, TaxRule]

DEFAULT_TAX_RULES: Final[TaxRuleTable] = MappingProxyType(
    {
        "GB": TaxRule(policy=TaxPolicy.INCLUSIVE, rate=GB_VAT_RATE, label=GB_VAT_LABEL),
        "US": TaxRule(policy=TaxPolicy.ADDITIVE, rate=US_SALES_TAX_RATE, label=US_TAX_LABEL),
    }
)


def freeze_tax_rules(rules: Mapping[str, TaxRule]) -> TaxRuleTable:
    """Копия таблицы в read-only виде (вызывающий код не может её мутировать)."""
    return MappingProxyType(dict(rules))
