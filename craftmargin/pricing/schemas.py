# craftmargin/pricing/schemas.py
"""
Pydantic models for the deterministic pricing engine.

Inputs use extra="ignore" for forward compatibility. Results are frozen:
they are recomputed from inputs, never edited in place.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from craftmargin.validation import Number

from .channels import Channel


class CostInputs(BaseModel):
    """Raw cost inputs for one product unit."""

    model_config = ConfigDict(extra="ignore", frozen=True, allow_inf_nan=False)

    materials_cost: Number = Field(default=0.0, ge=0.0, description="Materials cost per unit")
    labor_hours: Number = Field(default=0.0, ge=0.0, description="Hours of labor per unit")
    labor_rate: Number = Field(default=0.0, ge=0.0, description="Hourly labor rate")
    overhead_percentage: Number = Field(
        default=0.0,
        ge=0.0,
        description="Overhead as a percentage of materials + labor",
    )


class MaterialLine(BaseModel):
    """A single material used in a product."""

    model_config = ConfigDict(extra="ignore", frozen=True, allow_inf_nan=False)

    name: str = Field(min_length=1, description="Material name")
    quantity: Number = Field(ge=0.0, description="Quantity used per unit")
    unit: str = Field(default="piece", description="Unit of measure")
    cost_per_unit: Number = Field(ge=0.0, description="Cost per unit of measure")
    supplier: str | None = Field(default=None, description="Current supplier")

    @computed_field
    @property
    def total_cost(self) -> float:
        return self.quantity * self.cost_per_unit


class PricingResult(BaseModel):
    """Unit-economics breakdown for one channel at one selling price."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    channel: Channel
    selling_price: float
    materials_cost: float
    labor_cost: float
    overhead_cost: float
    total_cost: float
    marketplace_fee: float
    profit: float
    profit_margin: float = Field(description="Profit as a percentage of selling price")

    def to_record(self) -> dict[str, Any]:
        """Snapshot for the persistence collaborator, stamped with UTC time."""
        record = self.model_dump(mode="json")
        record["calculated_at"] = datetime.now(timezone.utc).isoformat()
        return record


class OptimalPrice(BaseModel):
    """Result of solving for the price that reaches a target margin."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    channel: Channel
    target_margin: float
    base_cost: float = Field(description="Materials + labor + overhead")
    fee_rate: float = Field(description="Proportional fee rate k of the channel")
    raw_price: float = Field(description="Closed-form solution before rounding")
    price: float = Field(description="Recommended price after psychological rounding")
    psychological: bool = Field(description="Whether .99 rounding was applied")
