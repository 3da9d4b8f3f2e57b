# craftmargin/tools/common.py
"""Helpers shared by the tool implementations."""

from craftmargin.config.schema import CraftMarginConfig
from craftmargin.pricing.calculator import resolve_inputs
from craftmargin.pricing.schemas import CostInputs


def build_cost_inputs(
    materials_cost: float = 0.0,
    labor_hours: float = 0.0,
    labor_rate: float | None = None,
    overhead_percentage: float = 0.0,
    config: CraftMarginConfig | None = None,
) -> CostInputs:
    """
    Assemble validated CostInputs, filling labor_rate from config when omitted.

    Raises:
        InputError: If any value is negative or not a finite number
    """
    config = config or CraftMarginConfig()
    if labor_rate is None:
        labor_rate = config.pricing.default_labor_rate
    return resolve_inputs(
        {
            "materials_cost": materials_cost,
            "labor_hours": labor_hours,
            "labor_rate": labor_rate,
            "overhead_percentage": overhead_percentage,
        }
    )
