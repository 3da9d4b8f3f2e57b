# tests/unit/test_prompts.py
"""Unit tests for advisory prompt builders."""

import pytest
from pydantic import ValidationError

from craftmargin.advisory.prompts import (
    BETTER_PRICE_SHAPE,
    COMPETITIVE_PRICING_SHAPE,
    MATERIAL_PRICE_SHAPE,
    PARSE_INPUT_SHAPE,
    build_better_price_prompt,
    build_competitive_pricing_prompt,
    build_material_price_prompt,
    build_parse_input_prompt,
)
from craftmargin.advisory.schemas import (
    BetterPriceParams,
    CompetitivePricingParams,
    MaterialPriceParams,
    ParseInputParams,
)
from craftmargin.errors import InputError


class TestCompetitivePricingPrompt:
    def test_embeds_materials_total_and_shape(self):
        params = CompetitivePricingParams(
            craft_category="Jewelry Making",
            materials=[
                {"name": "silver wire", "quantity": 2, "unit": "m", "cost_per_unit": 1.5},
                {"name": "clasp", "quantity": 1, "cost_per_unit": 0.75},
            ],
        )

        prompt = build_competitive_pricing_prompt(params)

        assert "handmade Jewelry Making products" in prompt.user_prompt
        assert "- silver wire: 2 m at $1.50/m = $3.00" in prompt.user_prompt
        assert "- clasp: 1 piece at $0.75/piece = $0.75" in prompt.user_prompt
        assert "Total materials cost: $3.75" in prompt.user_prompt
        assert COMPETITIVE_PRICING_SHAPE in prompt.user_prompt
        assert prompt.system_prompt

    def test_control_characters_stripped(self):
        params = CompetitivePricingParams(
            craft_category="Pottery\x00\x07",
            materials=[{"name": "clay", "quantity": 1, "cost_per_unit": 4}],
        )

        prompt = build_competitive_pricing_prompt(params)

        assert "\x00" not in prompt.user_prompt
        assert "handmade Pottery products" in prompt.user_prompt

    def test_blank_category_rejected(self):
        params = CompetitivePricingParams(
            craft_category="\x01 ",
            materials=[{"name": "clay", "quantity": 1, "cost_per_unit": 4}],
        )

        with pytest.raises(InputError, match="craft_category"):
            build_competitive_pricing_prompt(params)


class TestMaterialPricePrompt:
    def test_includes_known_price_and_supplier(self):
        params = MaterialPriceParams(
            material_name="Sterling silver wire",
            category="Jewelry Making",
            current_price=12.5,
            unit="oz",
            supplier="Rio Grande",
        )

        prompt = build_material_price_prompt(params)

        assert '"Sterling silver wire"' in prompt.user_prompt
        assert "Current price paid: $12.50 per oz" in prompt.user_prompt
        assert "Current supplier: Rio Grande" in prompt.user_prompt
        assert MATERIAL_PRICE_SHAPE in prompt.user_prompt

    def test_without_known_price(self):
        params = MaterialPriceParams(material_name="Beeswax", category="Candles")

        prompt = build_material_price_prompt(params)

        assert "What the maker pays today" not in prompt.user_prompt


class TestBetterPricePrompt:
    def test_embeds_current_supplier_price_and_shape(self):
        params = BetterPriceParams(
            material_name="Soy wax flakes",
            current_price=4.25,
            unit="lb",
            supplier="CandleScience",
            category="Candles",
        )

        prompt = build_better_price_prompt(params)

        assert "- Material: Soy wax flakes" in prompt.user_prompt
        assert "- Current supplier: CandleScience" in prompt.user_prompt
        assert "- Current price: $4.25 per lb" in prompt.user_prompt
        assert "- Craft category: Candles" in prompt.user_prompt
        assert BETTER_PRICE_SHAPE in prompt.user_prompt
        assert "procurement specialist" in prompt.system_prompt

    def test_unknown_supplier_and_default_unit(self):
        prompt = build_better_price_prompt(
            BetterPriceParams(material_name="Jump rings", current_price=0.1)
        )

        assert "- Current supplier: unknown" in prompt.user_prompt
        assert "per unit" in prompt.user_prompt
        assert "Craft category" not in prompt.user_prompt

    def test_current_price_required(self):
        with pytest.raises(ValidationError):
            BetterPriceParams(material_name="Jump rings")


class TestParseInputPrompt:
    def test_lists_saved_products(self):
        params = ParseInputParams(
            user_input="50 pairs of hoop earrings",
            saved_products=[
                {"id": "p1", "product_name": "Hoop earrings", "craft_category": "Jewelry"},
            ],
        )

        prompt = build_parse_input_prompt(params)

        assert 'User input: "50 pairs of hoop earrings"' in prompt.user_prompt
        assert "- Hoop earrings (Jewelry) [id: p1]" in prompt.user_prompt
        assert PARSE_INPUT_SHAPE in prompt.user_prompt

    def test_no_saved_products(self):
        prompt = build_parse_input_prompt(ParseInputParams(user_input="3 candles"))
        assert "(none)" in prompt.user_prompt

    def test_long_input_truncated(self):
        prompt = build_parse_input_prompt(ParseInputParams(user_input="x" * 5000))
        assert "x" * 1000 in prompt.user_prompt
        assert "x" * 1001 not in prompt.user_prompt
