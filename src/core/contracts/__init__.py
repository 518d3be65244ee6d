"""
Contract Validation Module

Модуль для валидации JSON конфигурации (таблицы налоговых правил).
"""

from .tax_rules import load_tax_rules, tax_rules_from_document
from .validators import (
    ContractValidator,
    SchemaLoader,
    TaxRulesValidator,
    validate_tax_rules,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TaxRulesValidator",
    # Functions
    "validate_tax_rules",
    "tax_rules_from_document",
    "load_tax_rules",
]
