# craftmargin/advisory/service.py
"""
Advisory service: one entry point per use case, all through the fallback chain.

Flow for every call: validate params -> build prompt -> orchestrator ->
validate response text against the use case schema. Each failure mode comes
back as an AIResponse with a distinct error_code:

- input_error: params did not validate (no provider was called)
- all_providers_failed: every tier failed, there is no advice
- response_parse: a provider answered but the advice is unusable
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from craftmargin.errors import CraftMarginError, InputError, ResponseParseError
from craftmargin.llm.fallback import FallbackOrchestrator
from craftmargin.llm.types import AIResponse
from craftmargin.validation import validate_model

from .prompts import (
    PromptPair,
    build_better_price_prompt,
    build_competitive_pricing_prompt,
    build_material_price_prompt,
    build_parse_input_prompt,
)
from .schemas import (
    BetterPriceParams,
    CompetitivePricingAdvice,
    CompetitivePricingParams,
    MaterialPriceCheck,
    MaterialPriceParams,
    ParsedMaterialRequest,
    ParseInputParams,
    SupplierAlternatives,
)
from .validator import validate_advice

logger = logging.getLogger(__name__)


class UseCase(str, Enum):
    COMPETITIVE_PRICING = "competitive_pricing"
    MATERIAL_PRICES = "material_prices"
    BETTER_PRICES = "better_prices"
    PARSE_INPUT = "parse_input"


@dataclass(frozen=True)
class UseCaseSpec:
    """Params model, prompt builder and advice schema for one use case."""

    params: type[BaseModel]
    build_prompt: Callable[[Any], PromptPair]
    schema: type[BaseModel]


USE_CASES: dict[UseCase, UseCaseSpec] = {
    UseCase.COMPETITIVE_PRICING: UseCaseSpec(
        CompetitivePricingParams, build_competitive_pricing_prompt, CompetitivePricingAdvice
    ),
    UseCase.MATERIAL_PRICES: UseCaseSpec(
        MaterialPriceParams, build_material_price_prompt, MaterialPriceCheck
    ),
    UseCase.BETTER_PRICES: UseCaseSpec(
        BetterPriceParams, build_better_price_prompt, SupplierAlternatives
    ),
    UseCase.PARSE_INPUT: UseCaseSpec(
        ParseInputParams, build_parse_input_prompt, ParsedMaterialRequest
    ),
}


def coerce_use_case(use_case: UseCase | str) -> UseCase:
    if isinstance(use_case, UseCase):
        return use_case
    try:
        return UseCase(str(use_case).strip().lower())
    except ValueError:
        valid = ", ".join(u.value for u in UseCase)
        raise InputError(f"Unknown use case '{use_case}'. Must be one of: {valid}")


async def call_advisory(
    use_case: UseCase | str,
    params: BaseModel | dict[str, Any],
    orchestrator: FallbackOrchestrator,
) -> AIResponse:
    """
    Run one advisory call.

    Args:
        use_case: Which advisory use case to run
        params: Params model or mapping for that use case
        orchestrator: Fallback chain to send the prompt through

    Returns:
        AIResponse whose ``data`` is the validated advice model on success.
        Never raises.
    """
    try:
        use_case = coerce_use_case(use_case)
        spec = USE_CASES[use_case]
        prompt = spec.build_prompt(validate_model(spec.params, params))
    except CraftMarginError as e:
        logger.warning(f"Advisory call rejected: {e}")
        return AIResponse.fail(e)

    logger.info(f"Advisory call: {use_case.value}")
    response = await orchestrator.call(prompt.user_prompt, prompt.system_prompt)
    if not response.success:
        return response

    advice = validate_advice(response.data, spec.schema)
    if isinstance(advice, ResponseParseError):
        failed = AIResponse.fail(advice, provider=response.provider)
        failed.raw = advice.raw
        failed.attempts = response.attempts
        return failed

    response.data = advice
    return response


async def get_competitive_pricing(
    params: CompetitivePricingParams | dict[str, Any], orchestrator: FallbackOrchestrator
) -> AIResponse:
    """Cost-reduction suggestions, market price range and insights."""
    return await call_advisory(UseCase.COMPETITIVE_PRICING, params, orchestrator)


async def discover_material_prices(
    params: MaterialPriceParams | dict[str, Any], orchestrator: FallbackOrchestrator
) -> AIResponse:
    """Current market price, range and suppliers for a material."""
    return await call_advisory(UseCase.MATERIAL_PRICES, params, orchestrator)


async def find_better_material_prices(
    params: BetterPriceParams | dict[str, Any], orchestrator: FallbackOrchestrator
) -> AIResponse:
    """Cheaper alternative suppliers for a material, with claimed savings."""
    return await call_advisory(UseCase.BETTER_PRICES, params, orchestrator)


async def parse_user_input(
    params: ParseInputParams | dict[str, Any], orchestrator: FallbackOrchestrator
) -> AIResponse:
    """Structured quantity/product/dimensions from free text."""
    return await call_advisory(UseCase.PARSE_INPUT, params, orchestrator)
