"""Money — денежная сумма с кодом валюты

Immutable Pydantic value object. Сумма может быть отрицательной или нулевой
(скидки, возвраты), но обязана быть конечным числом.
"""

import math
from typing import Final

from pydantic import BaseModel, Field, field_validator


# Длина ISO 4217 кода валюты
CURRENCY_CODE_LENGTH: Final[int] = 3


class Money(BaseModel):
    """Сумма + валюта.

    - amount: конечное число (NaN/inf запрещены)
    - currency: ISO 4217-подобный код (USD, GBP, EUR)
    """

    amount: float = Field(..., description="Сумма в основных единицах валюты")
    currency: str = Field(
        ...,
        min_length=CURRENCY_CODE_LENGTH,
        max_length=CURRENCY_CODE_LENGTH,
        pattern=r"^[A-Z]{3}$",
        description="Код валюты (USD, GBP, ...)",
    )

    model_config = {"frozen": True}

    @field_validator("amount")
    @classmethod
    def validate_amount_finite(cls, v: float) -> float:
        """Проверка, что сумма конечна"""
        if not math.isfinite(v):
            raise ValueError(f"amount must be finite, got {v}")
        return v
