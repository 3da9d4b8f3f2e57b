# craftmargin/llm/__init__.py
"""LLM provider adapters and the three-tier fallback orchestrator."""

from .base import DEFAULT_TIMEOUT, ProviderAdapter
from .deepseek import DeepSeekAdapter
from .factory import create_adapters, create_orchestrator
from .fallback import FallbackOrchestrator, FallbackRun, FallbackState
from .gemini import GeminiAdapter
from .openai_chat import OpenAIAdapter
from .types import AIResponse, TierAttempt

__all__ = [
    "AIResponse",
    "TierAttempt",
    "ProviderAdapter",
    "DeepSeekAdapter",
    "GeminiAdapter",
    "OpenAIAdapter",
    "FallbackOrchestrator",
    "FallbackRun",
    "FallbackState",
    "create_adapters",
    "create_orchestrator",
    "DEFAULT_TIMEOUT",
]
