"""
PricingMath — арифметика цен и налогов

Чистые функции без валидации диапазонов: отрицательные и нулевые суммы
проходят как обычная арифметика (скидки, возвраты).

Формулы:
- additive tax:   tax = amount * rate
- inclusive:      gross = amount * (1 + rate)
- конверсия:      converted = round_cents(amount * exchange_rate)
"""

import math
from typing import Final


# Количество минорных единиц (центов/пенсов) в основной единице валюты
MINOR_UNITS_PER_MAJOR: Final[int] = 100


def round_cents(amount: float) -> float:
    """
    Округление до 2 знаков, half-up (0.125 → 0.13, -0.125 → -0.12).

    Args:
        amount: Сумма в основных единицах

    Returns:
        Сумма, округлённая до центов
    """
    return math.floor(amount * MINOR_UNITS_PER_MAJOR + 0.5) / MINOR_UNITS_PER_MAJOR


def estimate_additive_tax(amount: float, rate: float) -> float:
    """
    Оценка налога, добавляемого сверху (US sales tax).

    Args:
        amount: Сумма без налога
        rate: Ставка (например, 0.0875)

    Returns:
        amount * rate (без округления, округляет форматтер)
    """
    return amount * rate


def gross_up_inclusive(amount: float, rate: float) -> float:
    """
    Сумма с включённым налогом (UK VAT).

    Args:
        amount: Сумма без налога
        rate: Ставка (например, 0.20)

    Returns:
        amount * (1 + rate)
    """
    return amount * (1.0 + rate)


def convert_currency(amount: float, exchange_rate: float) -> float:
    """
    Конверсия суммы по курсу с округлением до центов.

    Args:
        amount: Сумма в исходной валюте
        exchange_rate: Курс (единиц целевой валюты за 1 единицу исходной)

    Returns:
        Сумма в целевой валюте

    Raises:
        ValueError: Если курс не положительный или не конечный
    """
    if not math.isfinite(exchange_rate) or exchange_rate <= 0:
        raise ValueError(f"exchange_rate must be positive and finite, got {exchange_rate}")

    return round_cents(amount * exchange_rate)
