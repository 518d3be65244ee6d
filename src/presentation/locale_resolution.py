"""Выбор локали запроса

Порядок:
1. Явный override (?locale=en-GB или cookie), если локаль поддерживается
2. Страна (GeoIP) через COUNTRY_LOCALE_MAP
3. Accept-Language браузера
4. DEFAULT_LOCALE (en-US)

Определение страны по IP здесь не выполняется: код страны приходит извне.
"""

import logging
from typing import Iterable, List, Optional

from src.core.domain.locale import (
    COUNTRY_LOCALE_MAP,
    DEFAULT_LOCALE,
    LocaleInfo,
    SupportedLocale,
    get_locale_info,
)

logger = logging.getLogger(__name__)


def parse_accept_language(accept_language: Optional[str]) -> List[str]:
    """
    Разбор заголовка Accept-Language.

    Args:
        accept_language: "en-GB,en;q=0.9,fr;q=0.8"

    Returns:
        ["en-GB", "en", "fr"] (q-параметры отбрасываются, порядок сохраняется)
    """
    if not accept_language:
        return []

    locales = []
    for part in accept_language.split(","):
        tag = part.strip().split(";")[0].strip()
        if tag:
            locales.append(tag)
    return locales


def determine_locale(
    country: Optional[str] = None,
    browser_locales: Iterable[str] = (),
) -> SupportedLocale:
    """
    Лучшая локаль по стране и языкам браузера.

    Args:
        country: Код страны (US, GB, UK)
        browser_locales: Теги из Accept-Language в порядке предпочтения

    Returns:
        SupportedLocale
    """
    if country and country in COUNTRY_LOCALE_MAP:
        return COUNTRY_LOCALE_MAP[country]

    for browser_locale in browser_locales:
        if browser_locale.startswith("en-GB") or browser_locale == "en-gb":
            return SupportedLocale.EN_GB
        if browser_locale.startswith("en-US") or browser_locale in ("en-us", "en"):
            return SupportedLocale.EN_US

    return DEFAULT_LOCALE


def resolve_locale(
    override: Optional[str] = None,
    country: Optional[str] = None,
    accept_language: Optional[str] = None,
) -> SupportedLocale:
    """
    Локаль запроса с учётом явного выбора пользователя.

    Args:
        override: Локаль из query/cookie; неподдерживаемая игнорируется
        country: Код страны из GeoIP
        accept_language: Заголовок Accept-Language

    Returns:
        SupportedLocale
    """
    if override:
        try:
            return SupportedLocale(override)
        except ValueError:
            logger.debug("Ignoring unsupported locale override %r", override)

    locale = determine_locale(country, parse_accept_language(accept_language))
    logger.debug(
        "Resolved locale %s (country=%r, accept_language=%r)",
        locale.value,
        country,
        accept_language,
    )
    return locale


def locale_context(locale: str) -> LocaleInfo:
    """Профиль (валюта, регион, терминология) для выбранной локали."""
    return get_locale_info(locale)
