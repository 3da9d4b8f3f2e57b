# craftmargin/pricing/__init__.py
"""
Deterministic cost-and-profit engine.

Provides:
- Per-channel marketplace fee formulas
- Cost aggregation and profit/margin resolution
- Closed-form optimal price solving with psychological rounding
"""

from .calculator import calculate, compare_channels, profit_margin, total_cost
from .channels import AmazonCategory, Channel, FeeSchedule, fee, fee_breakdown, fee_schedule
from .materials import total_materials_cost
from .optimizer import optimal_price, psychological_price, solve_price
from .schemas import CostInputs, MaterialLine, OptimalPrice, PricingResult

__all__ = [
    "AmazonCategory",
    "Channel",
    "CostInputs",
    "FeeSchedule",
    "MaterialLine",
    "OptimalPrice",
    "PricingResult",
    "calculate",
    "compare_channels",
    "fee",
    "fee_breakdown",
    "fee_schedule",
    "optimal_price",
    "profit_margin",
    "psychological_price",
    "solve_price",
    "total_cost",
    "total_materials_cost",
]
