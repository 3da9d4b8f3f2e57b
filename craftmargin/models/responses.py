# craftmargin/models/responses.py
"""
Pydantic response models for tool outputs.

Every tool returns one of these dumped to a dict. ``success`` discriminates
results from ErrorResponse; tools never raise past this layer.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from craftmargin.errors import CraftMarginError
from craftmargin.merge import PriceCheckOutcome, PricingReport, SupplierComparison
from craftmargin.pricing.schemas import OptimalPrice, PricingResult


class ErrorResponse(BaseModel):
    """Failure result of any tool."""

    model_config = ConfigDict(extra="ignore")

    success: Literal[False] = False
    error: str = Field(description="Human-readable error message")
    error_code: str = Field(description="Stable error code, e.g. 'input_error'")

    @classmethod
    def from_error(cls, error: CraftMarginError) -> "ErrorResponse":
        return cls(error=str(error), error_code=error.code)


class ProfitResponse(BaseModel):
    """Response from calculate_profit tool."""

    model_config = ConfigDict(extra="ignore")

    success: Literal[True] = True
    result: PricingResult
    fee_breakdown: dict[str, float] = Field(description="Marketplace fee by component")
    record: dict[str, Any] = Field(description="Timestamped snapshot for persistence")


class OptimalPriceResponse(BaseModel):
    """Response from suggest_price tool."""

    model_config = ConfigDict(extra="ignore")

    success: Literal[True] = True
    optimal: OptimalPrice
    result: PricingResult = Field(description="Breakdown at the recommended price")


class FeeComparisonResponse(BaseModel):
    """Response from compare_fees tool."""

    model_config = ConfigDict(extra="ignore")

    success: Literal[True] = True
    selling_price: float
    channels: dict[str, PricingResult]
    best_marketplace: str = Field(description="Marketplace channel with the highest profit")


class AdvisoryResponse(BaseModel):
    """Response from advise tool."""

    model_config = ConfigDict(extra="ignore")

    success: Literal[True] = True
    use_case: str
    provider: str | None
    advice: dict[str, Any]
    attempts: list[dict[str, Any]] = Field(default_factory=list)
    report: PricingReport | None = Field(
        default=None, description="Advice merged with the cost breakdown, when costs were given"
    )
    price_check: PriceCheckOutcome | None = Field(
        default=None, description="Comparison with the stored material price, when given"
    )
    supplier_comparison: SupplierComparison | None = Field(
        default=None, description="Alternative suppliers ranked against the stored price"
    )


class AdvisoryErrorResponse(ErrorResponse):
    """Advisory failure; keeps the raw text when the advice was unusable."""

    use_case: str | None = None
    provider: str | None = None
    raw: str | None = None
    attempts: list[dict[str, Any]] = Field(default_factory=list)
