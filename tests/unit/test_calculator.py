# tests/unit/test_calculator.py
"""Unit tests for cost aggregation and profit resolution."""

import pytest
from pydantic import ValidationError

from craftmargin.errors import InputError
from craftmargin.pricing.calculator import (
    calculate,
    compare_channels,
    labor_cost,
    overhead_cost,
    profit_margin,
    total_cost,
)
from craftmargin.pricing.channels import Channel
from craftmargin.pricing.materials import total_materials_cost
from craftmargin.pricing.schemas import CostInputs


def _inputs(**overrides):
    data = {
        "materials_cost": 10.0,
        "labor_hours": 1.0,
        "labor_rate": 25.0,
        "overhead_percentage": 20.0,
    }
    data.update(overrides)
    return CostInputs(**data)


# ---------------------------------------------------------------------------
# Cost aggregation
# ---------------------------------------------------------------------------

class TestCostAggregation:
    def test_labor(self):
        assert labor_cost(_inputs(labor_hours=2.5, labor_rate=20)) == 50.0

    def test_overhead_on_materials_plus_labor(self):
        assert overhead_cost(_inputs()) == pytest.approx(7.0)

    def test_total(self):
        assert total_cost(_inputs()) == pytest.approx(42.0)

    def test_zero_inputs(self):
        assert total_cost(CostInputs()) == 0.0


class TestCostInputs:
    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            CostInputs(materials_cost=-1)

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            CostInputs(labor_hours=float("nan"))

    def test_calculate_wraps_validation_as_input_error(self):
        with pytest.raises(InputError, match="labor_rate"):
            calculate({"labor_rate": -5}, 10)

    def test_unknown_keys_ignored(self):
        assert CostInputs(materials_cost=1, sku="abc").materials_cost == 1

    @pytest.mark.parametrize(
        "field, value",
        [
            ("materials_cost", "10"),
            ("labor_hours", True),
            ("labor_rate", "25"),
            ("overhead_percentage", False),
        ],
    )
    def test_numeric_strings_and_booleans_rejected(self, field, value):
        with pytest.raises(ValidationError):
            CostInputs(**{field: value})

    def test_calculate_rejects_numeric_string(self):
        with pytest.raises(InputError, match="labor_rate"):
            calculate({"labor_rate": "25"}, 10)


# ---------------------------------------------------------------------------
# Profit resolution
# ---------------------------------------------------------------------------

class TestCalculate:
    def test_none_channel_profit_is_price_minus_total(self):
        result = calculate(_inputs(), 100)
        assert result.channel is Channel.NONE
        assert result.marketplace_fee == 0.0
        assert result.profit == 100 - result.total_cost
        assert result.profit_margin == pytest.approx(58.0)

    def test_zero_price_margin_is_zero(self):
        result = calculate(_inputs(), 0)
        assert result.profit == pytest.approx(-42.0)
        assert result.profit_margin == 0.0

    def test_etsy_fee_reduces_profit(self):
        result = calculate(_inputs(), 20, "etsy")
        assert result.marketplace_fee == pytest.approx(5.10)
        assert result.profit == pytest.approx(20 - 42 - 5.10)

    def test_accepts_mapping(self):
        result = calculate({"materials_cost": 5}, 10)
        assert result.profit == 5.0

    def test_negative_price_rejected(self):
        with pytest.raises(InputError):
            calculate(_inputs(), -10)

    def test_overflowing_totals_rejected(self):
        with pytest.raises(InputError, match="too large"):
            calculate(CostInputs(materials_cost=1e308, overhead_percentage=100), 10)

    def test_result_is_frozen(self):
        result = calculate(_inputs(), 100)
        with pytest.raises(ValidationError):
            result.profit = 1.0

    def test_record_is_timestamped(self):
        record = calculate(_inputs(), 100).to_record()
        assert record["channel"] == "none"
        assert "calculated_at" in record

    def test_profit_margin_helper(self):
        assert profit_margin(25, 100) == 25.0
        assert profit_margin(-5, 0) == 0.0


class TestCompareChannels:
    def test_every_channel_present(self):
        results = compare_channels(_inputs(), 100, "jewelry")
        assert set(results) == set(Channel)
        assert results[Channel.AMAZON].marketplace_fee == pytest.approx(20 + 3.49 + 1.75)

    def test_same_total_cost_everywhere(self):
        results = compare_channels(_inputs(), 60)
        assert len({r.total_cost for r in results.values()}) == 1


class TestMaterials:
    def test_total_materials_cost(self):
        items = [
            {"name": "silver wire", "quantity": 2, "unit": "m", "cost_per_unit": 1.5},
            {"name": "clasp", "quantity": 1, "cost_per_unit": 0.75},
        ]
        assert total_materials_cost(items) == pytest.approx(3.75)

    def test_bad_line_rejected(self):
        with pytest.raises(InputError):
            total_materials_cost([{"name": "bead", "quantity": -1, "cost_per_unit": 1}])

    def test_string_cost_per_unit_rejected(self):
        with pytest.raises(InputError, match="cost_per_unit"):
            total_materials_cost([{"name": "bead", "quantity": 1, "cost_per_unit": "0.10"}])
