# craftmargin/pricing/calculator.py
"""Cost aggregation and profit resolution."""

import logging
import math
from typing import Any

from craftmargin.errors import InputError
from craftmargin.validation import sanitize_amount, validate_model

from .channels import AmazonCategory, Channel, coerce_channel, fee
from .schemas import CostInputs, PricingResult

logger = logging.getLogger(__name__)


def resolve_inputs(inputs: CostInputs | dict[str, Any]) -> CostInputs:
    """Accept a CostInputs or a plain mapping; raises InputError if invalid."""
    return validate_model(CostInputs, inputs)


def labor_cost(inputs: CostInputs) -> float:
    return inputs.labor_hours * inputs.labor_rate


def overhead_cost(inputs: CostInputs) -> float:
    """Overhead on materials + labor (never on the overhead-inclusive total)."""
    subtotal = inputs.materials_cost + labor_cost(inputs)
    return subtotal * (inputs.overhead_percentage / 100)


def total_cost(inputs: CostInputs) -> float:
    subtotal = inputs.materials_cost + labor_cost(inputs)
    return subtotal + overhead_cost(inputs)


def profit_margin(profit: float, selling_price: float) -> float:
    """Profit as a percentage of price; exactly 0 when the price is 0."""
    if selling_price > 0:
        return profit / selling_price * 100
    return 0.0


def calculate(
    inputs: CostInputs | dict[str, Any],
    selling_price: float,
    channel: Channel | str = Channel.NONE,
    category: AmazonCategory | str | None = None,
) -> PricingResult:
    """
    Compute the unit-economics breakdown for one channel.

    Args:
        inputs: Cost inputs (model or mapping)
        selling_price: Price per unit (>= 0)
        channel: Sales channel
        category: Amazon category (ignored for other channels)

    Returns:
        Frozen PricingResult

    Raises:
        InputError: On invalid inputs, price, channel or category
    """
    inputs = resolve_inputs(inputs)
    price = sanitize_amount(selling_price, "selling_price")
    channel = coerce_channel(channel)

    labor = labor_cost(inputs)
    overhead = overhead_cost(inputs)
    total = total_cost(inputs)
    marketplace_fee = fee(channel, price, category)
    profit = price - total - marketplace_fee
    if not (math.isfinite(total) and math.isfinite(profit)):
        raise InputError("Cost inputs or price are too large: totals overflow")

    result = PricingResult(
        channel=channel,
        selling_price=price,
        materials_cost=inputs.materials_cost,
        labor_cost=labor,
        overhead_cost=overhead,
        total_cost=total,
        marketplace_fee=marketplace_fee,
        profit=profit,
        profit_margin=profit_margin(profit, price),
    )
    logger.debug(
        f"Calculated {channel.value}: price={price}, total_cost={total}, "
        f"fee={marketplace_fee}, profit={profit}"
    )
    return result


def compare_channels(
    inputs: CostInputs | dict[str, Any],
    selling_price: float,
    category: AmazonCategory | str | None = None,
) -> dict[Channel, PricingResult]:
    """Breakdown at the same price on every channel, keyed by channel."""
    inputs = resolve_inputs(inputs)
    return {channel: calculate(inputs, selling_price, channel, category) for channel in Channel}
