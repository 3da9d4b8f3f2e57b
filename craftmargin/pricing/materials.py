# craftmargin/pricing/materials.py
"""Material line-item totals feeding CostInputs.materials_cost."""

from collections.abc import Iterable
from typing import Any

from craftmargin.validation import validate_model

from .schemas import MaterialLine


def to_material_lines(items: Iterable[MaterialLine | dict[str, Any]]) -> list[MaterialLine]:
    """Validate raw material items; raises InputError on the first bad one."""
    return [validate_model(MaterialLine, item) for item in items]


def total_materials_cost(items: Iterable[MaterialLine | dict[str, Any]]) -> float:
    """Sum of quantity * cost_per_unit over all lines."""
    total = 0.0
    for line in to_material_lines(items):
        total += line.total_cost
    return total
