# craftmargin/llm/fallback.py
"""
Three-tier fallback orchestrator.

State machine:

    IDLE -> TRY_TIER1 -> TRY_TIER2 -> TRY_TIER3 -> FAILED
                |            |            |
                +------------+------------+--> SUCCEEDED

Tiers are tried strictly in order, one at a time, each at most once per
orchestration. The first success ends the run. There is no backoff and no
parallel or speculative execution: fallback is sequential to bound spend.
"""

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Protocol

from craftmargin.errors import AllProvidersFailedError

from .types import AIResponse, TierAttempt

logger = logging.getLogger(__name__)


class Provider(Protocol):
    """Anything with the adapter call contract (real adapters or test doubles)."""

    provider_id: str

    async def call(self, prompt: str, system_prompt: str) -> AIResponse: ...


class FallbackState(str, Enum):
    IDLE = "idle"
    TRY_TIER1 = "try_tier1"
    TRY_TIER2 = "try_tier2"
    TRY_TIER3 = "try_tier3"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


_TIER_STATES = (FallbackState.TRY_TIER1, FallbackState.TRY_TIER2, FallbackState.TRY_TIER3)

# Transition taken when the current state's tier fails
_ON_FAILURE = {
    FallbackState.TRY_TIER1: FallbackState.TRY_TIER2,
    FallbackState.TRY_TIER2: FallbackState.TRY_TIER3,
    FallbackState.TRY_TIER3: FallbackState.FAILED,
}

TERMINAL_STATES = frozenset({FallbackState.SUCCEEDED, FallbackState.FAILED})


class FallbackRun:
    """
    State of a single orchestration.

    Created fresh for every call so concurrent orchestrations share nothing.
    """

    def __init__(self) -> None:
        self.state = FallbackState.IDLE
        self.history: list[FallbackState] = [FallbackState.IDLE]
        self.attempts: list[TierAttempt] = []

    def transition(self, new_state: FallbackState) -> None:
        logger.debug(f"Fallback {self.state.value} -> {new_state.value}")
        self.state = new_state
        self.history.append(new_state)

    @property
    def tier(self) -> int:
        """1-based tier number of the current TRY_* state."""
        return _TIER_STATES.index(self.state) + 1

    @property
    def done(self) -> bool:
        return self.state in TERMINAL_STATES


class FallbackOrchestrator:
    """Sole integration point between callers and provider adapters."""

    def __init__(self, providers: Sequence[Provider]):
        """
        Initialize orchestrator.

        Args:
            providers: Exactly three adapters in priority order

        Raises:
            ValueError: If not exactly three providers are given
        """
        if len(providers) != len(_TIER_STATES):
            raise ValueError(
                f"Fallback chain needs exactly {len(_TIER_STATES)} providers, got {len(providers)}"
            )
        self._providers = tuple(providers)

    @property
    def provider_ids(self) -> list[str]:
        return [p.provider_id for p in self._providers]

    async def _call_tier(self, provider: Provider, prompt: str, system_prompt: str) -> AIResponse:
        try:
            return await provider.call(prompt, system_prompt)
        except Exception as e:
            # Adapters must not raise; a double that does counts as a tier failure
            logger.error(f"Provider {provider.provider_id} raised: {e}", exc_info=True)
            return AIResponse.fail(e)

    async def call(self, prompt: str, system_prompt: str) -> AIResponse:
        """
        Run the fallback chain for one prompt.

        Returns:
            The first successful tier response (tagged with its provider and
            the attempts made), or a terminal failure with
            error="all providers failed".
        """
        run = FallbackRun()
        run.transition(FallbackState.TRY_TIER1)
        response: AIResponse | None = None

        while not run.done:
            provider = self._providers[run.tier - 1]
            logger.info(f"Trying tier {run.tier} ({provider.provider_id})")
            response = await self._call_tier(provider, prompt, system_prompt)
            run.attempts.append(
                TierAttempt(
                    tier=run.tier,
                    provider=provider.provider_id,
                    success=response.success,
                    error=response.error,
                )
            )

            if response.success:
                response.provider = response.provider or provider.provider_id
                logger.info(f"Tier {run.tier} ({provider.provider_id}) succeeded")
                run.transition(FallbackState.SUCCEEDED)
            else:
                logger.warning(
                    f"Tier {run.tier} ({provider.provider_id}) failed: {response.error}"
                )
                run.transition(_ON_FAILURE[run.state])

        if run.state is FallbackState.SUCCEEDED and response is not None:
            response.attempts = run.attempts
            return response

        error = AllProvidersFailedError([a.error or "unknown error" for a in run.attempts])
        logger.error(f"All providers failed: {error.errors}")
        terminal = AIResponse.fail(error)
        terminal.attempts = run.attempts
        return terminal
