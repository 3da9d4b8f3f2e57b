# craftmargin/advisory/__init__.py
"""
AI advisory subsystem.

Provides:
- Prompt builders with literal JSON shapes for each use case
- Schema validation of AI responses (typed parse errors, no silent defaults)
- call_advisory() and one function per use case, routed through the fallback chain

Knows nothing about the pricing engine; merging happens in craftmargin.merge.
"""

from .prompts import PromptPair
from .schemas import (
    BetterPriceParams,
    CompetitivePricingAdvice,
    CompetitivePricingParams,
    MaterialPriceCheck,
    MaterialPriceParams,
    ParsedMaterialRequest,
    ParseInputParams,
    SupplierAlternatives,
    SupplierOffer,
)
from .service import (
    UseCase,
    call_advisory,
    discover_material_prices,
    find_better_material_prices,
    get_competitive_pricing,
    parse_user_input,
)
from .validator import extract_json, validate_advice

__all__ = [
    "UseCase",
    "call_advisory",
    "get_competitive_pricing",
    "discover_material_prices",
    "find_better_material_prices",
    "parse_user_input",
    "PromptPair",
    "BetterPriceParams",
    "CompetitivePricingAdvice",
    "CompetitivePricingParams",
    "MaterialPriceCheck",
    "MaterialPriceParams",
    "ParsedMaterialRequest",
    "ParseInputParams",
    "SupplierAlternatives",
    "SupplierOffer",
    "extract_json",
    "validate_advice",
]
