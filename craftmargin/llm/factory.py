# craftmargin/llm/factory.py
"""Factory for the provider adapters and the fallback chain."""

import os
from collections.abc import Mapping

from craftmargin.config.schema import CraftMarginConfig

from .deepseek import DeepSeekAdapter
from .fallback import FallbackOrchestrator
from .gemini import GeminiAdapter
from .openai_chat import OpenAIAdapter

# Priority order of the fallback chain
TIER_ADAPTERS = (DeepSeekAdapter, GeminiAdapter, OpenAIAdapter)


def create_adapters(
    config: CraftMarginConfig, env: Mapping[str, str] | None = None
) -> list[DeepSeekAdapter | GeminiAdapter | OpenAIAdapter]:
    """
    Build one adapter per tier, each with its own credential from the environment.

    Args:
        config: Root CraftMarginConfig (supplies the transport timeout)
        env: Environment mapping (defaults to os.environ)

    Returns:
        Adapters in priority order
    """
    env = os.environ if env is None else env
    return [
        adapter_cls(api_key=env.get(adapter_cls.credential_env), timeout=config.advisory.timeout)
        for adapter_cls in TIER_ADAPTERS
    ]


def create_orchestrator(
    config: CraftMarginConfig, env: Mapping[str, str] | None = None
) -> FallbackOrchestrator:
    """Build the fallback orchestrator over the configured adapters."""
    return FallbackOrchestrator(create_adapters(config, env))
