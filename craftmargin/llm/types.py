# craftmargin/llm/types.py
"""Normalized AI response types shared by all provider adapters."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class TierAttempt:
    """One tier call made during a fallback orchestration."""

    tier: int
    provider: str
    success: bool
    error: str | None = None


@dataclass
class AIResponse:
    """
    Tagged result of an AI call.

    Attributes:
        success: Whether usable data was produced
        data: Generated text from an adapter, or a validated schema model
              once the advisory layer has parsed it
        error: Human-readable error if success=False
        provider: Id of the provider that answered (None if none did)
        error_code: Stable error code (see craftmargin.errors)
        raw: Raw provider text kept when it failed schema validation
        attempts: Tier calls made by the orchestrator, in order
    """

    success: bool
    data: Any = None
    error: str | None = None
    provider: str | None = None
    error_code: str | None = None
    raw: str | None = None
    attempts: list[TierAttempt] = field(default_factory=list)

    @classmethod
    def ok(cls, data: Any, provider: str | None) -> "AIResponse":
        return cls(success=True, data=data, provider=provider)

    @classmethod
    def fail(cls, error: BaseException | str, provider: str | None = None) -> "AIResponse":
        """Build a failed response from an error, taking its code when it has one."""
        code = getattr(error, "code", None) if isinstance(error, BaseException) else None
        return cls(success=False, error=str(error), provider=provider, error_code=code)

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form; pydantic models in ``data`` are dumped by alias."""
        data = self.data
        if hasattr(data, "model_dump"):
            data = data.model_dump(mode="json", by_alias=True)
        return {
            "success": self.success,
            "data": data,
            "error": self.error,
            "provider": self.provider,
            "error_code": self.error_code,
            "attempts": [asdict(a) for a in self.attempts],
        }
