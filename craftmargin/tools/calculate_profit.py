# craftmargin/tools/calculate_profit.py
"""
calculate_profit tool implementation.

Unit-economics breakdown for one channel at one selling price.
"""

import logging

from craftmargin.config.schema import CraftMarginConfig
from craftmargin.errors import CraftMarginError
from craftmargin.models.responses import ErrorResponse, ProfitResponse
from craftmargin.pricing.calculator import calculate
from craftmargin.pricing.channels import fee_breakdown

from .common import build_cost_inputs

logger = logging.getLogger(__name__)


def calculate_profit(
    selling_price: float,
    materials_cost: float = 0.0,
    labor_hours: float = 0.0,
    labor_rate: float | None = None,
    overhead_percentage: float = 0.0,
    channel: str | None = None,
    category: str | None = None,
    config: CraftMarginConfig | None = None,
) -> dict:
    """
    Calculate cost, fee, profit and margin.

    Args:
        selling_price: Price per unit
        materials_cost: Materials cost per unit
        labor_hours: Labor hours per unit
        labor_rate: Hourly rate (config default when None)
        overhead_percentage: Overhead % of materials + labor
        channel: Sales channel (config default when None)
        category: Amazon category (config default when None)
        config: Configuration (defaults when None)

    Returns:
        ProfitResponse or ErrorResponse as dict
    """
    config = config or CraftMarginConfig()
    channel = channel or config.pricing.default_channel
    category = category or config.pricing.amazon_category

    try:
        inputs = build_cost_inputs(
            materials_cost, labor_hours, labor_rate, overhead_percentage, config=config
        )
        result = calculate(inputs, selling_price, channel, category)
        breakdown = fee_breakdown(result.channel, result.selling_price, category)
    except CraftMarginError as e:
        logger.warning(f"calculate_profit failed: {e}")
        return ErrorResponse.from_error(e).model_dump(mode="json")

    logger.info(
        f"Profit on {result.channel.value} at {result.selling_price:.2f}: "
        f"{result.profit:.2f} ({result.profit_margin:.1f}%)"
    )
    response = ProfitResponse(result=result, fee_breakdown=breakdown, record=result.to_record())
    return response.model_dump(mode="json")
