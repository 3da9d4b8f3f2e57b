# craftmargin/merge.py
"""
Merging validated advice into deterministic pricing results.

This is the calling layer: the only module that sees both the pricing
engine and the advice schemas. The AI layer itself knows nothing about costs.
"""

import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from craftmargin.advisory.schemas import (
    CompetitivePricingAdvice,
    MarketPriceRange,
    MaterialPriceCheck,
    SupplierAlternatives,
)
from craftmargin.pricing.calculator import calculate
from craftmargin.pricing.channels import AmazonCategory
from craftmargin.pricing.schemas import CostInputs, PricingResult
from craftmargin.validation import sanitize_amount

logger = logging.getLogger(__name__)

# Price monitor thresholds, as a fraction of the previous price
ALERT_THRESHOLD = 0.10
UPDATE_THRESHOLD = 0.05

MarketPosition = Literal["below_market", "within_market", "above_market"]


class PricingReport(BaseModel):
    """Deterministic result combined with competitive advice."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    result: PricingResult
    market_range: MarketPriceRange
    market_position: MarketPosition
    at_market_average: PricingResult = Field(
        description="Breakdown if the product sold at the market average price"
    )
    suggestions: list[str]
    insights: list[str]


class PriceCheckOutcome(BaseModel):
    """How a material's market price compares to what the maker pays."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    previous_price: float
    new_price: float
    price_difference: float
    is_alert: bool = Field(description="Change exceeds the alert threshold")
    should_update: bool = Field(description="Change is large enough to update the stored price")
    notes: str


class SupplierSaving(BaseModel):
    """An alternative supplier with savings recomputed against the stored price."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    supplier: str
    price: float
    savings: float = Field(description="Stored price minus this price, per unit")
    quality_notes: str
    shipping_notes: str


class SupplierComparison(BaseModel):
    """Alternative supplier offers ranked against what the maker pays today."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    current_price: float
    found_better_price: bool = Field(description="At least one offer is strictly cheaper")
    reported_better_price: bool = Field(description="What the advice itself claimed")
    cheaper_offers: list[SupplierSaving] = Field(description="Cheaper offers, lowest price first")
    best_offer: SupplierSaving | None
    potential_savings: float = Field(description="Per-unit saving of the best offer")
    savings_percentage: float = Field(description="Potential savings as a % of the stored price")


def market_position(price: float, market_range: MarketPriceRange) -> MarketPosition:
    if price < market_range.min:
        return "below_market"
    if price > market_range.max:
        return "above_market"
    return "within_market"


def merge_competitive_advice(
    inputs: CostInputs | dict[str, Any],
    result: PricingResult,
    advice: CompetitivePricingAdvice,
    category: AmazonCategory | str | None = None,
) -> PricingReport:
    """
    Place a pricing result in the market range the advice reports.

    The margin at the market average is recomputed by the pricing engine,
    never taken from the model.
    """
    at_average = calculate(inputs, advice.price_range.average, result.channel, category)
    position = market_position(result.selling_price, advice.price_range)
    logger.info(
        f"Price {result.selling_price:.2f} is {position} "
        f"({advice.price_range.min:.2f}-{advice.price_range.max:.2f})"
    )
    return PricingReport(
        result=result,
        market_range=advice.price_range,
        market_position=position,
        at_market_average=at_average,
        suggestions=advice.suggestions,
        insights=advice.insights,
    )


def evaluate_price_check(previous_price: float, check: MaterialPriceCheck) -> PriceCheckOutcome:
    """
    Compare a fresh market price with the stored one.

    A change above 10% of the stored price raises an alert; above 5% the
    stored price should be updated. A stored price of 0 only flags when the
    new price is non-zero.
    """
    previous = sanitize_amount(previous_price, "previous_price")
    difference = check.current_price - previous
    change = abs(difference)

    return PriceCheckOutcome(
        previous_price=previous,
        new_price=check.current_price,
        price_difference=difference,
        is_alert=change > previous * ALERT_THRESHOLD,
        should_update=change > previous * UPDATE_THRESHOLD,
        notes=check.notes,
    )


def compare_supplier_offers(
    current_price: float, advice: SupplierAlternatives
) -> SupplierComparison:
    """
    Rank alternative suppliers against the stored price.

    Savings are recomputed from the quoted prices; the savings and
    ``foundBetterPrice`` the model reports are not trusted. Offers at or above
    the stored price are dropped.
    """
    current = sanitize_amount(current_price, "current_price")

    cheaper = sorted(
        (
            SupplierSaving(
                supplier=offer.supplier,
                price=offer.price,
                savings=current - offer.price,
                quality_notes=offer.quality_notes,
                shipping_notes=offer.shipping_notes,
            )
            for offer in advice.suggestions
            if offer.price < current
        ),
        key=lambda saving: saving.price,
    )
    best = cheaper[0] if cheaper else None
    potential = best.savings if best else 0.0

    if advice.found_better_price != bool(cheaper):
        logger.warning(
            f"Advice reported foundBetterPrice={advice.found_better_price} but "
            f"{len(cheaper)} offer(s) undercut {current:.2f}"
        )

    return SupplierComparison(
        current_price=current,
        found_better_price=bool(cheaper),
        reported_better_price=advice.found_better_price,
        cheaper_offers=cheaper,
        best_offer=best,
        potential_savings=potential,
        savings_percentage=potential / current * 100 if current > 0 else 0.0,
    )
