# craftmargin/config/schema.py
"""
Pydantic configuration models for craftmargin.

All models use extra="ignore" to allow unknown YAML keys without crashing.
Provider credentials are never stored here; they come from the environment.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from craftmargin.pricing.channels import AmazonCategory, Channel


class PricingConfig(BaseModel):
    """Defaults for the deterministic pricing engine."""

    model_config = ConfigDict(extra="ignore")

    default_labor_rate: float = Field(
        default=25.0, ge=0.0, description="Hourly labor rate used when none is given"
    )
    target_margin: float = Field(
        default=50.0,
        lt=100.0,
        description="Target profit margin (%) for the optimal price solver",
    )
    psychological_pricing: bool = Field(
        default=True, description="Round solved prices to the next .99"
    )
    default_channel: Channel = Field(default=Channel.NONE, description="Default sales channel")
    amazon_category: AmazonCategory = Field(
        default=AmazonCategory.DEFAULT, description="Default Amazon referral category"
    )


class AdvisoryConfig(BaseModel):
    """AI advisory configuration."""

    model_config = ConfigDict(extra="ignore")

    enabled: bool = Field(default=True, description="Enable AI advisory calls")
    timeout: float = Field(
        default=30.0,
        gt=0.0,
        le=300.0,
        description="Per-call transport timeout in seconds",
    )


class OutputConfig(BaseModel):
    """Output configuration."""

    model_config = ConfigDict(extra="ignore")

    verbosity: Literal["quiet", "normal", "verbose"] = Field(
        default="normal", description="Logging verbosity level"
    )
    currency_symbol: str = Field(default="$", description="Currency symbol for display")


class CraftMarginConfig(BaseModel):
    """Root configuration for craftmargin."""

    model_config = ConfigDict(extra="ignore")

    pricing: PricingConfig = Field(default_factory=PricingConfig)
    advisory: AdvisoryConfig = Field(default_factory=AdvisoryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
