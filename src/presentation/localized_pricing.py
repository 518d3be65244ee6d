"""LocalizedPrice — цена парковки в валюте и налоговом режиме региона

Шаги:
1. Конверсия base_price по курсу (курс задаёт вызывающий; та же валюта → 1)
2. Налог региона:
   - INCLUSIVE → final = converted * (1 + rate), includes_tax=True
   - ADDITIVE  → final = converted, includes_tax=False (налог показывается отдельно)
   - нет правила → final = converted, includes_tax=True, rate=0
3. Округление до центов и форматирование в целевой валюте

Курсы валют не запрашиваются здесь: сеть и кэш курсов вне этого модуля.
"""

from typing import Mapping

from pydantic import BaseModel, Field

from src.core.domain.tax import DEFAULT_TAX_RULES, TaxRule
from src.core.math.pricing_math import convert_currency, gross_up_inclusive, round_cents
from src.presentation.protocols import LocaleFormatter


class LocalizedPrice(BaseModel):
    """Итоговая цена для региона."""

    price: float = Field(..., description="Цена, округлённая до центов")
    currency: str = Field(..., pattern=r"^[A-Z]{3}$", description="Целевая валюта")
    formatted: str = Field(..., description="Текст цены от LocaleFormatter")
    includes_tax: bool = Field(..., description="Налог уже включён в price")
    tax_rate: float = Field(..., ge=0.0, le=1.0, description="Ставка налога региона")

    model_config = {"frozen": True}


def compute_localized_price(
    base_price: float,
    base_currency: str,
    target_currency: str,
    region: str,
    exchange_rate: float,
    formatter: LocaleFormatter,
    tax_rules: Mapping[str, TaxRule] = DEFAULT_TAX_RULES,
) -> LocalizedPrice:
    """
    Локализованная цена.

    Args:
        base_price: Цена в исходной валюте (без налога)
        base_currency: Исходная валюта
        target_currency: Валюта отображения
        region: Юрисдикция для налоговых правил
        exchange_rate: Курс base → target (игнорируется при одинаковых валютах)
        formatter: LocaleFormatter для текста цены
        tax_rules: Таблица налоговых правил

    Returns:
        LocalizedPrice

    Raises:
        ValueError: Если курс не положительный
    """
    rate = 1.0 if base_currency == target_currency else exchange_rate
    converted = convert_currency(base_price, rate)

    rule = tax_rules.get(region)
    if rule is None:
        final_price = converted
        includes_tax = True
        tax_rate = 0.0
    elif rule.is_inclusive:
        final_price = gross_up_inclusive(converted, rule.rate)
        includes_tax = True
        tax_rate = rule.rate
    else:
        final_price = converted
        includes_tax = False
        tax_rate = rule.rate

    return LocalizedPrice(
        price=round_cents(final_price),
        currency=target_currency,
        formatted=formatter.format_price(final_price, currency=target_currency),
        includes_tax=includes_tax,
        tax_rate=tax_rate,
    )
