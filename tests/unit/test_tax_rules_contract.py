"""
Tests for tax_rules JSON Schema contract and loader

Проверяет:
- Валидность самой схемы
- Валидацию правильных документов
- Детекцию нарушений (required, enum, pattern, min/max)
- Загрузку из файла: дополнение и замена DEFAULT_TAX_RULES
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    SchemaLoader,
    TaxRulesValidator,
    load_tax_rules,
    tax_rules_from_document,
    validate_tax_rules,
)
from src.core.domain.tax import DEFAULT_TAX_RULES, TaxPolicy
from src.presentation import PricingPresenter, SymbolLocaleFormatter, TerminologyResolver


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_document():
    """Валидный документ с правилами."""
    return {
        "rules": {
            "CA": {"policy": "additive", "rate": 0.13, "label": "HST"},
            "IE": {"policy": "inclusive", "rate": 0.23, "label": "Includes VAT"},
        }
    }


@pytest.fixture
def rules_file(tmp_path, valid_document):
    path = tmp_path / "tax_rules.json"
    path.write_text(json.dumps(valid_document), encoding="utf-8")
    return path


# =============================================================================
# SCHEMA
# =============================================================================


class TestSchema:
    """Схема загружается и кэшируется"""

    def test_schema_loads(self) -> None:
        schema = SchemaLoader().load_schema("tax_rules")
        assert schema["title"] == "Tax rule table"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("tax_rules") is loader.load_schema("tax_rules")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


class TestValidation:
    """Валидация документов"""

    def test_valid(self, valid_document) -> None:
        validate_tax_rules(valid_document)
        assert TaxRulesValidator().is_valid(valid_document)

    def test_empty_rules_valid(self) -> None:
        validate_tax_rules({"rules": {}})

    def test_missing_rules_key(self) -> None:
        with pytest.raises(ValidationError):
            validate_tax_rules({})

    def test_lowercase_jurisdiction_rejected(self) -> None:
        doc = {"rules": {"gb": {"policy": "inclusive", "rate": 0.2, "label": "VAT"}}}
        with pytest.raises(ValidationError):
            validate_tax_rules(doc)

    def test_unknown_policy_rejected(self) -> None:
        doc = {"rules": {"GB": {"policy": "hidden", "rate": 0.2, "label": "VAT"}}}
        with pytest.raises(ValidationError):
            validate_tax_rules(doc)

    @pytest.mark.parametrize("rate", [-0.1, 1.5, "0.2"])
    def test_bad_rate_rejected(self, rate) -> None:
        doc = {"rules": {"US": {"policy": "additive", "rate": rate, "label": "tax"}}}
        with pytest.raises(ValidationError):
            validate_tax_rules(doc)

    def test_missing_label_rejected(self) -> None:
        doc = {"rules": {"US": {"policy": "additive", "rate": 0.1}}}
        assert not TaxRulesValidator().is_valid(doc)
        assert len(list(TaxRulesValidator().iter_errors(doc))) == 1


# =============================================================================
# LOADER
# =============================================================================


class TestTaxRulesLoader:
    """Построение таблицы из документа / файла"""

    def test_document_replaces(self, valid_document) -> None:
        rules = tax_rules_from_document(valid_document)

        assert set(rules) == {"CA", "IE"}
        assert rules["CA"].policy == TaxPolicy.ADDITIVE
        assert rules["CA"].rate == pytest.approx(0.13)

    def test_document_extends_base(self, valid_document) -> None:
        rules = tax_rules_from_document(valid_document, base=DEFAULT_TAX_RULES)
        assert set(rules) == {"GB", "US", "CA", "IE"}

    def test_result_is_read_only(self, valid_document) -> None:
        rules = tax_rules_from_document(valid_document)
        with pytest.raises(TypeError):
            rules["FR"] = rules["IE"]

    def test_load_file_extends_defaults(self, rules_file) -> None:
        rules = load_tax_rules(rules_file)

        assert set(rules) == {"GB", "US", "CA", "IE"}
        # Defaults не изменились
        assert set(DEFAULT_TAX_RULES) == {"GB", "US"}

    def test_load_file_replaces(self, rules_file) -> None:
        rules = load_tax_rules(rules_file, extend_defaults=False)
        assert "US" not in rules

    def test_override_default_rate(self, tmp_path) -> None:
        path = tmp_path / "us.json"
        path.write_text(
            json.dumps({"rules": {"US": {"policy": "additive", "rate": 0.1, "label": "tax"}}}),
            encoding="utf-8",
        )
        presenter = PricingPresenter(
            SymbolLocaleFormatter.for_locale("en-US"),
            TerminologyResolver.for_locale("en-US"),
            tax_rules=load_tax_rules(path),
        )

        assert presenter.format_tax_note("US", 100) == "Plus $10.00 tax"
        assert presenter.format_tax_note("GB", 100) == "Includes VAT"

    def test_invalid_file_rejected(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"rules": {"US": {"policy": "additive"}}}), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_tax_rules(path)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_tax_rules(tmp_path / "missing.json")
