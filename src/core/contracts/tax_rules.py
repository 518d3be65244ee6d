"""
Загрузка таблицы налоговых правил из JSON

Формат документа:
    {"rules": {"GB": {"policy": "inclusive", "rate": 0.2, "label": "Includes VAT"}}}

Документ проверяется по tax_rules.json до построения моделей, поэтому ошибки
конфигурации всплывают при загрузке, а не при рендере цены.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from src.core.contracts.validators import validate_tax_rules
from src.core.domain.tax import DEFAULT_TAX_RULES, TaxRule, TaxRuleTable, freeze_tax_rules

logger = logging.getLogger(__name__)


def tax_rules_from_document(
    data: Dict[str, Any],
    base: Optional[Mapping[str, TaxRule]] = None,
) -> TaxRuleTable:
    """
    Построение таблицы правил из JSON документа.

    Args:
        data: Документ {"rules": {...}}
        base: Таблица, поверх которой применяются правила документа
              (None → документ задаёт таблицу целиком)

    Returns:
        Read-only таблица правил

    Raises:
        ValidationError: Если документ не соответствует схеме
    """
    validate_tax_rules(data)

    rules: Dict[str, TaxRule] = dict(base) if base is not None else {}
    for jurisdiction, raw_rule in data["rules"].items():
        rules[jurisdiction] = TaxRule.model_validate(raw_rule)

    logger.debug("Loaded %d tax rules: %s", len(rules), sorted(rules))
    return freeze_tax_rules(rules)


def load_tax_rules(
    path: Union[str, Path],
    extend_defaults: bool = True,
) -> TaxRuleTable:
    """
    Загрузка таблицы правил из файла.

    Args:
        path: Путь к JSON файлу
        extend_defaults: True → правила файла дополняют/переопределяют
                         DEFAULT_TAX_RULES; False → заменяют целиком

    Returns:
        Read-only таблица правил

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        ValidationError: Если документ не соответствует схеме
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    logger.debug("Loading tax rules from %s (extend_defaults=%s)", path, extend_defaults)
    base = DEFAULT_TAX_RULES if extend_defaults else None
    return tax_rules_from_document(data, base=base)
