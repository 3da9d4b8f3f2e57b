# tests/unit/test_sanitize.py
"""Unit tests for input sanitization."""

import pytest

from craftmargin.errors import InputError
from craftmargin.pricing.schemas import CostInputs
from craftmargin.validation import require_number, sanitize_amount, sanitize_text, validate_model


class TestSanitizeAmount:
    def test_accepts_int_and_float(self):
        assert sanitize_amount(3, "x") == 3.0
        assert sanitize_amount(2.5, "x") == 2.5

    @pytest.mark.parametrize("value", [-0.01, float("nan"), float("-inf"), "5", None, False])
    def test_rejects(self, value):
        with pytest.raises(InputError, match="price"):
            sanitize_amount(value, "price")


class TestRequireNumber:
    def test_accepts_int_and_float(self):
        assert require_number(3) == 3
        assert require_number(2.5) == 2.5

    @pytest.mark.parametrize("value", ["5", True, None, [1]])
    def test_rejects(self, value):
        with pytest.raises(ValueError, match="expected a number"):
            require_number(value)


class TestSanitizeText:
    def test_strips_control_chars_and_whitespace(self):
        assert sanitize_text("  hello\x00 world\x1b ") == "hello world"

    def test_keeps_newlines_and_tabs(self):
        assert sanitize_text("a\tb\nc") == "a\tb\nc"

    def test_empty_rejected(self):
        with pytest.raises(InputError, match="name cannot be empty"):
            sanitize_text("   ", "name")

    def test_non_string_rejected(self):
        with pytest.raises(InputError):
            sanitize_text(42)

    def test_truncates(self):
        assert sanitize_text("abcdef", max_length=3) == "abc"


class TestValidateModel:
    def test_passes_through_instance(self):
        inputs = CostInputs(materials_cost=1)
        assert validate_model(CostInputs, inputs) is inputs

    def test_error_names_field(self):
        with pytest.raises(InputError) as exc:
            validate_model(CostInputs, {"overhead_percentage": -5})
        assert "overhead_percentage" in str(exc.value)
        assert str(exc.value).startswith("Invalid CostInputs")
