# craftmargin/tools/compare_fees.py
"""
compare_fees tool implementation.

Same product, same price, every channel side by side.
"""

import logging

from craftmargin.config.schema import CraftMarginConfig
from craftmargin.errors import CraftMarginError
from craftmargin.models.responses import ErrorResponse, FeeComparisonResponse
from craftmargin.pricing.calculator import compare_channels
from craftmargin.pricing.channels import Channel

from .common import build_cost_inputs

logger = logging.getLogger(__name__)


def compare_fees(
    selling_price: float,
    materials_cost: float = 0.0,
    labor_hours: float = 0.0,
    labor_rate: float | None = None,
    overhead_percentage: float = 0.0,
    category: str | None = None,
    config: CraftMarginConfig | None = None,
) -> dict:
    """
    Compare fees and profit across all channels at one price.

    Returns:
        FeeComparisonResponse or ErrorResponse as dict
    """
    config = config or CraftMarginConfig()
    category = category or config.pricing.amazon_category

    try:
        inputs = build_cost_inputs(
            materials_cost, labor_hours, labor_rate, overhead_percentage, config=config
        )
        results = compare_channels(inputs, selling_price, category)
    except CraftMarginError as e:
        logger.warning(f"compare_fees failed: {e}")
        return ErrorResponse.from_error(e).model_dump(mode="json")

    marketplaces = [r for channel, r in results.items() if channel is not Channel.NONE]
    best = max(marketplaces, key=lambda r: r.profit)
    response = FeeComparisonResponse(
        selling_price=best.selling_price,
        channels={channel.value: result for channel, result in results.items()},
        best_marketplace=best.channel.value,
    )
    return response.model_dump(mode="json")
