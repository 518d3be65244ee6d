"""Контракты внешних сервисов, которые потребляет PricingPresenter.

- LocaleFormatter: сумма + валюта → локализованный текст, валюта по умолчанию
- TextResolver: символьный ключ ("day") → локализованное слово

Presenter их только вызывает (read-only) и не выбирает/не инициализирует.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class LocaleFormatter(Protocol):
    """Форматтер денежных сумм для текущей локали."""

    @property
    def currency(self) -> str:
        """Валюта по умолчанию (ambient currency локали)."""
        ...

    def format_price(self, amount: float, currency: Optional[str] = None) -> str:
        """Форматирование суммы; currency=None → валюта по умолчанию."""
        ...


@runtime_checkable
class TextResolver(Protocol):
    """Ключ → локализованный текст. Тотальная функция."""

    def t(self, key: str) -> str:
        ...
