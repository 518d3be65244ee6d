"""
Core math modules для pricing

Арифметика цен: округление до центов, конверсия валют, налоги.
"""

from src.core.math.pricing_math import (
    MINOR_UNITS_PER_MAJOR,
    convert_currency,
    estimate_additive_tax,
    gross_up_inclusive,
    round_cents,
)

__all__ = [
    # Constants
    "MINOR_UNITS_PER_MAJOR",
    # Functions
    "convert_currency",
    "estimate_additive_tax",
    "gross_up_inclusive",
    "round_cents",
]
