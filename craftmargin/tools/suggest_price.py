# craftmargin/tools/suggest_price.py
"""
suggest_price tool implementation.

Solves for the price that reaches a target margin on a channel.
"""

import logging

from craftmargin.config.schema import CraftMarginConfig
from craftmargin.errors import CraftMarginError
from craftmargin.models.responses import ErrorResponse, OptimalPriceResponse
from craftmargin.pricing.calculator import calculate
from craftmargin.pricing.optimizer import optimal_price

from .common import build_cost_inputs

logger = logging.getLogger(__name__)


def suggest_price(
    materials_cost: float = 0.0,
    labor_hours: float = 0.0,
    labor_rate: float | None = None,
    overhead_percentage: float = 0.0,
    channel: str | None = None,
    category: str | None = None,
    target_margin: float | None = None,
    psychological: bool | None = None,
    config: CraftMarginConfig | None = None,
) -> dict:
    """
    Recommend a selling price for a target margin.

    Omitted settings fall back to the pricing section of the config.

    Returns:
        OptimalPriceResponse or ErrorResponse as dict
    """
    config = config or CraftMarginConfig()
    channel = channel or config.pricing.default_channel
    category = category or config.pricing.amazon_category
    if target_margin is None:
        target_margin = config.pricing.target_margin
    if psychological is None:
        psychological = config.pricing.psychological_pricing

    try:
        inputs = build_cost_inputs(
            materials_cost, labor_hours, labor_rate, overhead_percentage, config=config
        )
        optimal = optimal_price(inputs, channel, target_margin, category, psychological)
        result = calculate(inputs, optimal.price, optimal.channel, category)
    except CraftMarginError as e:
        logger.warning(f"suggest_price failed: {e}")
        return ErrorResponse.from_error(e).model_dump(mode="json")

    return OptimalPriceResponse(optimal=optimal, result=result).model_dump(mode="json")
