# craftmargin/pricing/optimizer.py
"""
Closed-form optimal price solver.

With an affine fee ``f0 + k*p`` and target margin tau (percent), the price is
``base_cost / (1 - tau/100 - k)``. The psychological ``.99`` adjustment is a
separate step applied to the solved price, never folded into the solve.
"""

import logging
import math
from typing import Any

from craftmargin.errors import InputError, UnsolvablePriceError

from .calculator import labor_cost, overhead_cost, resolve_inputs
from .channels import AmazonCategory, Channel, coerce_channel, fee_schedule
from .schemas import CostInputs, OptimalPrice

logger = logging.getLogger(__name__)

DEFAULT_TARGET_MARGIN = 50.0

# Denominators this close to zero are float residue of an exact zero
_MIN_DENOMINATOR = 1e-9


def solve_price(base_cost: float, target_margin: float, fee_rate: float) -> float:
    """
    Solve ``p = base_cost / (1 - target_margin/100 - fee_rate)``.

    Raises:
        UnsolvablePriceError: If the denominator is not meaningfully positive
    """
    denominator = 1 - target_margin / 100 - fee_rate
    if denominator <= _MIN_DENOMINATOR:
        raise UnsolvablePriceError(target_margin, fee_rate)
    return base_cost / denominator


def psychological_price(price: float) -> float:
    """Round up to the next whole unit minus one cent (41.2 -> 41.99)."""
    if not math.isfinite(price):
        raise InputError(f"Cannot round a non-finite price: {price}")
    if price <= 0:
        return 0.0
    return round(math.ceil(price) - 0.01, 2)


def optimal_price(
    inputs: CostInputs | dict[str, Any],
    channel: Channel | str = Channel.NONE,
    target_margin: float = DEFAULT_TARGET_MARGIN,
    category: AmazonCategory | str | None = None,
    psychological: bool = True,
) -> OptimalPrice:
    """
    Find the selling price that yields ``target_margin`` percent profit.

    Args:
        inputs: Cost inputs (model or mapping)
        channel: Sales channel whose proportional fee rate is solved for
        target_margin: Desired profit margin in percent
        category: Amazon category (ignored for other channels)
        psychological: Apply ``ceil(p) - 0.01`` after solving

    Returns:
        OptimalPrice with both the raw solve and the recommended price

    Raises:
        InputError: On invalid inputs or non-finite target margin
        UnsolvablePriceError: If no positive finite price exists
    """
    inputs = resolve_inputs(inputs)
    channel = coerce_channel(channel)
    if isinstance(target_margin, bool) or not isinstance(target_margin, (int, float)):
        raise InputError(f"target_margin must be a number, got {target_margin!r}")
    if not math.isfinite(target_margin):
        raise InputError(f"target_margin must be finite, got {target_margin}")

    base_cost = inputs.materials_cost + labor_cost(inputs) + overhead_cost(inputs)
    if not math.isfinite(base_cost):
        raise InputError("Cost inputs are too large to price: base cost overflows")
    fee_rate = fee_schedule(channel, category).rate

    raw_price = solve_price(base_cost, target_margin, fee_rate)
    if not math.isfinite(raw_price):
        raise InputError(
            "Cost inputs are too large to price: solved price overflows "
            f"at {target_margin:g}% margin"
        )
    price = psychological_price(raw_price) if psychological else raw_price

    logger.info(
        f"Optimal price on {channel.value} for {target_margin:g}% margin: "
        f"raw={raw_price:.4f}, recommended={price:.2f}"
    )
    return OptimalPrice(
        channel=channel,
        target_margin=float(target_margin),
        base_cost=base_cost,
        fee_rate=fee_rate,
        raw_price=raw_price,
        price=price,
        psychological=psychological,
    )
