# craftmargin/tools/advise.py
"""
advise tool implementation.

Runs an advisory use case through the fallback chain, then merges the
validated advice with deterministic results when the caller supplied costs
(competitive pricing) or a stored price (material prices, better prices).
"""

import logging
from typing import Any

from craftmargin.access import Feature, require_feature
from craftmargin.advisory.service import UseCase, call_advisory, coerce_use_case
from craftmargin.config.schema import CraftMarginConfig
from craftmargin.errors import CraftMarginError, InputError
from craftmargin.llm.factory import create_orchestrator
from craftmargin.llm.fallback import FallbackOrchestrator
from craftmargin.merge import (
    compare_supplier_offers,
    evaluate_price_check,
    merge_competitive_advice,
)
from craftmargin.models.responses import AdvisoryErrorResponse, AdvisoryResponse, ErrorResponse
from craftmargin.pricing.calculator import calculate, resolve_inputs

logger = logging.getLogger(__name__)

FEATURE_BY_USE_CASE = {
    UseCase.COMPETITIVE_PRICING: Feature.AI_INSIGHTS,
    UseCase.MATERIAL_PRICES: Feature.PRICE_MONITORING,
    UseCase.BETTER_PRICES: Feature.PRICE_MONITORING,
    UseCase.PARSE_INPUT: Feature.AI_INSIGHTS,
}


def _param(params: Any, name: str) -> Any:
    if isinstance(params, dict):
        return params.get(name)
    return getattr(params, name, None)


async def advise(
    use_case: str,
    params: dict[str, Any],
    entitled: bool,
    orchestrator: FallbackOrchestrator | None = None,
    config: CraftMarginConfig | None = None,
    cost_inputs: dict[str, Any] | None = None,
    selling_price: float | None = None,
    channel: str | None = None,
    category: str | None = None,
    previous_price: float | None = None,
) -> dict:
    """
    Get AI advice for a use case.

    Args:
        use_case: competitive_pricing, material_prices, better_prices, or parse_input
        params: Use-case params (see craftmargin.advisory.schemas)
        entitled: Whether the user has an active subscription
        orchestrator: Fallback chain (built from config and env when None)
        config: Configuration (defaults when None)
        cost_inputs: CostInputs fields; with selling_price, competitive advice
                     is merged into a pricing report
        selling_price: Current selling price for the merged report
        channel: Sales channel for the merged report
        category: Amazon category for the merged report
        previous_price: Stored material price to compare a price check or
                        supplier offers against (defaults to params["current_price"])

    Returns:
        AdvisoryResponse, AdvisoryErrorResponse or ErrorResponse as dict
    """
    config = config or CraftMarginConfig()

    try:
        use_case = coerce_use_case(use_case)
        require_feature(FEATURE_BY_USE_CASE[use_case], entitled)
        if cost_inputs is not None and not isinstance(cost_inputs, dict):
            kind = type(cost_inputs).__name__
            raise InputError(f"cost_inputs must be an object of CostInputs fields, got {kind}")
    except CraftMarginError as e:
        logger.warning(f"advise rejected: {e}")
        return ErrorResponse.from_error(e).model_dump(mode="json")

    if not config.advisory.enabled:
        return ErrorResponse(
            error="AI advisory is disabled in config", error_code="advisory_disabled"
        ).model_dump(mode="json")

    orchestrator = orchestrator or create_orchestrator(config)
    response = await call_advisory(use_case, params, orchestrator)
    attempts = response.to_dict()["attempts"]

    if not response.success:
        return AdvisoryErrorResponse(
            error=response.error or "unknown error",
            error_code=response.error_code or "error",
            use_case=use_case.value,
            provider=response.provider,
            raw=response.raw,
            attempts=attempts,
        ).model_dump(mode="json")

    advice = response.data
    report = None
    price_check = None
    supplier_comparison = None
    try:
        if (
            use_case is UseCase.COMPETITIVE_PRICING
            and cost_inputs is not None
            and selling_price is not None
        ):
            category = category or config.pricing.amazon_category
            inputs = resolve_inputs(
                {"labor_rate": config.pricing.default_labor_rate, **cost_inputs}
            )
            result = calculate(
                inputs, selling_price, channel or config.pricing.default_channel, category
            )
            report = merge_competitive_advice(inputs, result, advice, category)
        elif use_case is UseCase.MATERIAL_PRICES:
            if previous_price is None:
                previous_price = _param(params, "current_price")
            if previous_price is not None:
                price_check = evaluate_price_check(previous_price, advice)
        elif use_case is UseCase.BETTER_PRICES:
            # current_price is required by the params model
            if previous_price is None:
                previous_price = _param(params, "current_price")
            supplier_comparison = compare_supplier_offers(previous_price, advice)
    except CraftMarginError as e:
        logger.warning(f"advise merge failed: {e}")
        return ErrorResponse.from_error(e).model_dump(mode="json")

    return AdvisoryResponse(
        use_case=use_case.value,
        provider=response.provider,
        advice=advice.model_dump(mode="json", by_alias=True),
        attempts=attempts,
        report=report,
        price_check=price_check,
        supplier_comparison=supplier_comparison,
    ).model_dump(mode="json")
