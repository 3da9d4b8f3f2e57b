# craftmargin/server.py
"""
FastMCP server instance with tool registration.

CRITICAL: configure_logging() is called first to prevent stdout pollution.
All logging goes to stderr as JSON.
"""

from craftmargin.logging_config import configure_logging

configure_logging()

import logging
from typing import Any

from fastmcp import FastMCP

from craftmargin.config.loader import load_config
from craftmargin.llm.factory import create_orchestrator
from craftmargin.tools.advise import advise as _advise
from craftmargin.tools.calculate_profit import calculate_profit as _calculate_profit
from craftmargin.tools.compare_fees import compare_fees as _compare_fees
from craftmargin.tools.suggest_price import suggest_price as _suggest_price

logger = logging.getLogger(__name__)

mcp = FastMCP("craftmargin")

_config = load_config()
configure_logging(_config.output.verbosity)
logger.info(f"Loaded configuration: target_margin={_config.pricing.target_margin}")


@mcp.tool()
def calculate_profit(
    selling_price: float,
    materials_cost: float = 0.0,
    labor_hours: float = 0.0,
    labor_rate: float | None = None,
    overhead_percentage: float = 0.0,
    channel: str | None = None,
    category: str | None = None,
) -> dict:
    """Calculate labor, overhead, total cost, marketplace fee, profit and margin for one channel."""
    return _calculate_profit(
        selling_price,
        materials_cost,
        labor_hours,
        labor_rate,
        overhead_percentage,
        channel,
        category,
        config=_config,
    )


@mcp.tool()
def suggest_price(
    materials_cost: float = 0.0,
    labor_hours: float = 0.0,
    labor_rate: float | None = None,
    overhead_percentage: float = 0.0,
    channel: str | None = None,
    category: str | None = None,
    target_margin: float | None = None,
    psychological: bool | None = None,
) -> dict:
    """Solve for the selling price that reaches a target profit margin on a channel."""
    return _suggest_price(
        materials_cost,
        labor_hours,
        labor_rate,
        overhead_percentage,
        channel,
        category,
        target_margin,
        psychological,
        config=_config,
    )


@mcp.tool()
def compare_fees(
    selling_price: float,
    materials_cost: float = 0.0,
    labor_hours: float = 0.0,
    labor_rate: float | None = None,
    overhead_percentage: float = 0.0,
    category: str | None = None,
) -> dict:
    """Compare marketplace fees and profit across Etsy, Shopify and Amazon at one price."""
    return _compare_fees(
        selling_price,
        materials_cost,
        labor_hours,
        labor_rate,
        overhead_percentage,
        category,
        config=_config,
    )


@mcp.tool()
async def advise(
    use_case: str,
    params: dict[str, Any],
    entitled: bool,
    cost_inputs: dict[str, Any] | None = None,
    selling_price: float | None = None,
    channel: str | None = None,
    category: str | None = None,
    previous_price: float | None = None,
) -> dict:
    """
    Get AI advice via the provider fallback chain.

    Use cases: competitive_pricing, material_prices, better_prices, parse_input.
    """
    return await _advise(
        use_case,
        params,
        entitled,
        orchestrator=create_orchestrator(_config),
        config=_config,
        cost_inputs=cost_inputs,
        selling_price=selling_price,
        channel=channel,
        category=category,
        previous_price=previous_price,
    )


logger.info("MCP server initialized with 4 tools")
