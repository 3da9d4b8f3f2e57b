# tests/unit/test_validator.py
"""Unit tests for AI response extraction and schema validation."""

import json

import pytest

from craftmargin.advisory.schemas import (
    CompetitivePricingAdvice,
    MaterialPriceCheck,
    ParsedMaterialRequest,
    SupplierAlternatives,
)
from craftmargin.advisory.validator import extract_json, validate_advice
from craftmargin.errors import ResponseParseError

COMPETITIVE = {
    "suggestions": ["Buy wire in bulk", "Switch clasp supplier", "Use 925 plated findings"],
    "priceRange": {"min": 25, "max": 60, "average": 40},
    "insights": ["Minimalist pieces sell best under $45"],
}


ALTERNATIVES = {
    "foundBetterPrice": True,
    "suggestions": [
        {
            "supplier": "Bulk Apothecary",
            "price": 3.5,
            "savings": 0.75,
            "qualityNotes": "Same soy blend",
            "shippingNotes": "Free shipping over $49",
        }
    ],
    "totalPotentialSavings": 0.75,
}

class TestExtractJson:
    def test_direct(self):
        assert extract_json('{"a": 1}') == {"a": 1}

    def test_code_fence(self):
        raw = 'Here you go:\n```json\n{"a": 1}\n```\nHope this helps.'
        assert extract_json(raw) == {"a": 1}

    def test_embedded_in_prose(self):
        assert extract_json('Result: {"a": {"b": 2}} done') == {"a": {"b": 2}}

    def test_no_object(self):
        with pytest.raises(ValueError, match="No valid JSON object"):
            extract_json("I cannot help with that.")

    def test_top_level_array_rejected(self):
        with pytest.raises(ValueError, match="Expected a JSON object"):
            extract_json("[1, 2, 3]")

    def test_truncated_json_not_repaired(self):
        with pytest.raises(ValueError):
            extract_json('{"suggestions": ["a", "b"], "priceRange": {"min": 1')

    def test_deeply_nested_is_unparseable(self):
        with pytest.raises(ValueError, match="No valid JSON object"):
            extract_json("[" * 200000)


class TestValidateAdvice:
    def test_competitive_pricing_valid(self):
        advice = validate_advice(json.dumps(COMPETITIVE), CompetitivePricingAdvice)

        assert isinstance(advice, CompetitivePricingAdvice)
        assert advice.price_range.average == 40
        assert len(advice.suggestions) == 3

    def test_malformed_text_is_parse_error(self):
        result = validate_advice("Sure! Prices are around $40.", CompetitivePricingAdvice)

        assert isinstance(result, ResponseParseError)
        assert result.code == "response_parse"
        assert result.schema_name == "CompetitivePricingAdvice"
        assert result.raw == "Sure! Prices are around $40."

    def test_missing_numeric_field_not_defaulted(self):
        data = {**COMPETITIVE, "priceRange": {"min": 25, "max": 60}}

        result = validate_advice(json.dumps(data), CompetitivePricingAdvice)

        assert isinstance(result, ResponseParseError)
        assert "average" in result.reason

    def test_numeric_string_rejected(self):
        data = {"currentPrice": "12.50", "priceRange": {"min": 10, "max": 15},
                "suppliers": [], "notes": ""}

        result = validate_advice(json.dumps(data), MaterialPriceCheck)

        assert isinstance(result, ResponseParseError)
        assert "currentPrice" in result.reason

    def test_boolean_not_a_number(self):
        data = {"quantity": True, "productType": "earrings", "matchedProductId": None,
                "dimensions": None, "confidence": "high"}

        assert isinstance(validate_advice(json.dumps(data), ParsedMaterialRequest), ResponseParseError)

    def test_range_order_enforced(self):
        data = {**COMPETITIVE, "priceRange": {"min": 60, "max": 25, "average": 40}}

        assert isinstance(validate_advice(json.dumps(data), CompetitivePricingAdvice), ResponseParseError)

    def test_nullable_fields_must_be_present(self):
        data = {"quantity": 2, "productType": "earrings", "confidence": "low"}

        result = validate_advice(json.dumps(data), ParsedMaterialRequest)

        assert isinstance(result, ResponseParseError)

    def test_parse_input_valid_with_nulls(self):
        data = {"quantity": 50, "productType": "earrings", "matchedProductId": None,
                "dimensions": None, "confidence": "medium", "extra": "ignored"}

        parsed = validate_advice(json.dumps(data), ParsedMaterialRequest)

        assert isinstance(parsed, ParsedMaterialRequest)
        assert parsed.quantity == 50
        assert parsed.matched_product_id is None

    def test_deep_nesting_is_parse_error(self):
        raw = "Here: " + '{"a": ' * 50000 + "1" + "}" * 50000

        result = validate_advice(raw, CompetitivePricingAdvice)

        assert isinstance(result, ResponseParseError)
        assert result.raw == raw

    def test_deep_array_is_parse_error(self):
        result = validate_advice("[" * 200000, CompetitivePricingAdvice)

        assert isinstance(result, ResponseParseError)

    def test_non_string_input(self):
        result = validate_advice(None, MaterialPriceCheck)

        assert isinstance(result, ResponseParseError)
        assert "expected text" in result.reason


class TestSupplierAlternatives:
    def test_valid(self):
        advice = validate_advice(json.dumps(ALTERNATIVES), SupplierAlternatives)

        assert isinstance(advice, SupplierAlternatives)
        assert advice.found_better_price is True
        assert advice.suggestions[0].quality_notes == "Same soy blend"
        assert advice.total_potential_savings == 0.75

    def test_negative_savings_rejected(self):
        offer = {**ALTERNATIVES["suggestions"][0], "savings": -0.2}
        data = {**ALTERNATIVES, "suggestions": [offer]}

        result = validate_advice(json.dumps(data), SupplierAlternatives)

        assert isinstance(result, ResponseParseError)
        assert "savings" in result.reason

    def test_string_price_rejected(self):
        offer = {**ALTERNATIVES["suggestions"][0], "price": "3.50"}
        data = {**ALTERNATIVES, "suggestions": [offer]}

        assert isinstance(validate_advice(json.dumps(data), SupplierAlternatives), ResponseParseError)

    def test_found_better_price_must_be_boolean(self):
        data = {**ALTERNATIVES, "foundBetterPrice": "yes"}

        result = validate_advice(json.dumps(data), SupplierAlternatives)

        assert isinstance(result, ResponseParseError)
        assert "foundBetterPrice" in result.reason

    def test_total_savings_required(self):
        data = {k: v for k, v in ALTERNATIVES.items() if k != "totalPotentialSavings"}

        assert isinstance(validate_advice(json.dumps(data), SupplierAlternatives), ResponseParseError)
