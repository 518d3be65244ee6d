"""Locale — профили локалей сайта (en-US / en-GB)

Статическая конфигурация: валюта, регион, таймзона, форматы даты/времени,
единицы расстояния и таблица терминологии (parking lot ↔ car park).

Профили неизменяемы (frozen) и используются только для чтения.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Final, Literal, Mapping

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class SupportedLocale(str, Enum):
    """Поддерживаемые локали."""

    EN_US = "en-US"
    EN_GB = "en-GB"


DEFAULT_LOCALE: Final[SupportedLocale] = SupportedLocale.EN_US


class UnsupportedLocaleError(ValueError):
    """Запрошен профиль для неподдерживаемой локали."""

    pass


# =============================================================================
# MODELS
# =============================================================================


class LocaleInfo(BaseModel):
    """Профиль локали.

    terminology: ключ → локализованный термин (используется TextResolver)
    """

    locale: str = Field(..., description="BCP 47 тег локали")
    currency: str = Field(..., pattern=r"^[A-Z]{3}$", description="Валюта по умолчанию")
    region: str = Field(..., pattern=r"^[A-Z]{2}$", description="Код региона")
    timezone: str = Field(..., description="IANA таймзона")
    date_format: str = Field(..., description="Формат даты (MM/DD/YYYY, DD/MM/YYYY)")
    time_format: Literal[12, 24] = Field(..., description="12- или 24-часовой формат")
    distance_unit: Literal["miles", "km"] = Field(..., description="Единица расстояния")
    terminology: Dict[str, str] = Field(default_factory=dict, description="Терминология")

    model_config = {"frozen": True}


# =============================================================================
# КОНФИГУРАЦИЯ ЛОКАЛЕЙ
# =============================================================================

_EN_US = LocaleInfo(
    locale="en-US",
    currency="USD",
    region="US",
    timezone="America/New_York",
    date_format="MM/DD/YYYY",
    time_format=12,
    distance_unit="miles",
    terminology={
        "parking_lot": "parking lot",
        "car_park": "parking lot",
        "postcode": "ZIP code",
        "licence_plate": "license plate",
        "lorry": "truck",
        "motorway": "highway",
        "petrol": "gas",
        "boot": "trunk",
        "bonnet": "hood",
        "lift": "elevator",
        "queue": "line",
        "book": "reserve",
        "booking": "reservation",
        "cancelled": "canceled",
        "colour": "color",
        "centre": "center",
        "favourite": "favorite",
    },
)

_EN_GB = LocaleInfo(
    locale="en-GB",
    currency="GBP",
    region="GB",
    timezone="Europe/London",
    date_format="DD/MM/YYYY",
    time_format=24,
    distance_unit="km",
    terminology={
        "parking_lot": "car park",
        "car_park": "car park",
        "postcode": "postcode",
        "licence_plate": "number plate",
        "lorry": "lorry",
        "motorway": "motorway",
        "petrol": "petrol",
        "boot": "boot",
        "bonnet": "bonnet",
        "lift": "lift",
        "queue": "queue",
        "book": "book",
        "booking": "booking",
        "cancelled": "cancelled",
        "colour": "colour",
        "centre": "centre",
        "favourite": "favourite",
    },
)

LOCALE_CONFIG: Final[Mapping[SupportedLocale, LocaleInfo]] = MappingProxyType(
    {
        SupportedLocale.EN_US: _EN_US,
        SupportedLocale.EN_GB: _EN_GB,
    }
)

# Страна (GeoIP) → локаль. UK: альтернативный код для GB
COUNTRY_LOCALE_MAP: Final[Mapping[str, SupportedLocale]] = MappingProxyType(
    {
        "US": SupportedLocale.EN_US,
        "GB": SupportedLocale.EN_GB,
        "UK": SupportedLocale.EN_GB,
    }
)

CURRENCY_SYMBOLS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "USD": "$",
        "GBP": "\u00a3",  # £
        "EUR": "\u20ac",  # €
    }
)


def get_locale_info(locale: str) -> LocaleInfo:
    """
    Профиль локали по тегу.

    Args:
        locale: SupportedLocale или строка ("en-US", "en-GB")

    Returns:
        LocaleInfo

    Raises:
        UnsupportedLocaleError: Если локаль не поддерживается
    """
    try:
        return LOCALE_CONFIG[SupportedLocale(locale)]
    except ValueError as e:
        raise UnsupportedLocaleError(f"Unsupported locale: {locale!r}") from e
