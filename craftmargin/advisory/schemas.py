# craftmargin/advisory/schemas.py
"""
Pydantic schemas for advisory use cases.

Two kinds of model live here:
- *Params* models: what a caller passes in for each use case
- *Advice* models: the JSON shape an AI response must match

Advice models require every numeric field (no defaults), accept the camelCase
keys used in the prompt text, and ignore extra keys.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from craftmargin.validation import Number


# ---------------------------------------------------------------------------
# Advice (AI output) schemas
# ---------------------------------------------------------------------------

class _AdviceModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, allow_inf_nan=False)


class MarketPriceRange(_AdviceModel):
    """Market price range with its average."""

    min: Number = Field(ge=0.0)
    max: Number = Field(ge=0.0)
    average: Number = Field(ge=0.0)

    @model_validator(mode="after")
    def _check_order(self) -> "MarketPriceRange":
        if not (self.min <= self.average <= self.max):
            raise ValueError(
                f"expected min <= average <= max, got {self.min}, {self.average}, {self.max}"
            )
        return self


class PriceBand(_AdviceModel):
    """Min/max price band."""

    min: Number = Field(ge=0.0)
    max: Number = Field(ge=0.0)

    @model_validator(mode="after")
    def _check_order(self) -> "PriceBand":
        if self.min > self.max:
            raise ValueError(f"expected min <= max, got {self.min} > {self.max}")
        return self


class CompetitivePricingAdvice(_AdviceModel):
    """Cost-reduction suggestions, market price range, and competitive insights."""

    suggestions: list[str]
    price_range: MarketPriceRange = Field(alias="priceRange")
    insights: list[str]


class MaterialPriceCheck(_AdviceModel):
    """Current market price for a material, as reported by the price monitor."""

    current_price: Number = Field(alias="currentPrice", ge=0.0)
    price_range: PriceBand = Field(alias="priceRange")
    suppliers: list[str]
    notes: str


class SupplierOffer(_AdviceModel):
    """One alternative supplier quote for a material."""

    supplier: str = Field(min_length=1)
    price: Number = Field(ge=0.0)
    savings: Number = Field(ge=0.0)
    quality_notes: str = Field(alias="qualityNotes")
    shipping_notes: str = Field(alias="shippingNotes")


class SupplierAlternatives(_AdviceModel):
    """Cheaper suppliers for a material, with the savings the model claims."""

    found_better_price: bool = Field(alias="foundBetterPrice", strict=True)
    suggestions: list[SupplierOffer]
    total_potential_savings: Number = Field(alias="totalPotentialSavings", ge=0.0)


class ParsedMaterialRequest(_AdviceModel):
    """Structured form of a natural-language material calculator request."""

    quantity: Number = Field(gt=0.0)
    product_type: str = Field(alias="productType", min_length=1)
    matched_product_id: str | None = Field(alias="matchedProductId")
    dimensions: str | None
    confidence: Literal["high", "medium", "low"]


# ---------------------------------------------------------------------------
# Params (caller input) schemas
# ---------------------------------------------------------------------------

class MaterialItem(BaseModel):
    """A material line as described to the model."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    name: str = Field(min_length=1)
    quantity: Number = Field(ge=0.0)
    unit: str = Field(default="piece")
    cost_per_unit: Number = Field(ge=0.0)

    @computed_field
    @property
    def total_cost(self) -> float:
        return self.quantity * self.cost_per_unit


class CompetitivePricingParams(BaseModel):
    """Inputs for competitive pricing analysis of a material list."""

    model_config = ConfigDict(extra="ignore")

    craft_category: str = Field(min_length=1, description="Craft category, e.g. 'Jewelry Making'")
    materials: list[MaterialItem] = Field(min_length=1, description="Materials used per unit")
    product_description: str | None = Field(default=None, description="Optional product summary")


class MaterialPriceParams(BaseModel):
    """Inputs for looking up the current market price of a material."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    material_name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    current_price: float | None = Field(default=None, ge=0.0, description="Price paid today")
    unit: str | None = Field(default=None, description="Unit the price refers to")
    supplier: str | None = Field(default=None, description="Current supplier")


class BetterPriceParams(BaseModel):
    """Inputs for finding cheaper suppliers of a material already in use."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    material_name: str = Field(min_length=1)
    current_price: Number = Field(ge=0.0, description="Price paid today per unit")
    unit: str = Field(default="unit", min_length=1, description="Unit the price refers to")
    supplier: str | None = Field(default=None, description="Current supplier")
    category: str | None = Field(default=None, description="Craft category, e.g. 'Jewelry'")


class SavedProduct(BaseModel):
    """A product the user has saved, used to match parsed requests."""

    model_config = ConfigDict(extra="ignore")

    id: str
    product_name: str
    craft_category: str


class ParseInputParams(BaseModel):
    """Inputs for parsing a natural-language material calculator request."""

    model_config = ConfigDict(extra="ignore")

    user_input: str = Field(min_length=1)
    saved_products: list[SavedProduct] = Field(default_factory=list)
