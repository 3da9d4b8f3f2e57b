# craftmargin/advisory/validator.py
"""
Validation of AI response text against an advice schema.

Models wrap JSON in prose or code fences often enough that extraction tries
a few framings. Beyond that nothing is repaired: truncated or malformed JSON
and any schema mismatch are rejected wholesale.
"""

import json
import logging
import re
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from craftmargin.errors import ResponseParseError
from craftmargin.validation import format_validation_error

logger = logging.getLogger(__name__)

AdviceT = TypeVar("AdviceT", bound=BaseModel)

_FENCE = re.compile(r"```(?:json)?\s*\n(.*?)\n\s*```", re.DOTALL | re.IGNORECASE)
_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def extract_json(raw_output: str) -> dict[str, Any]:
    """
    Extract a JSON object from LLM output.

    Tries, in order:
    1. Direct parse (output is pure JSON)
    2. Code fence (```json ... ```)
    3. First ``{`` to last ``}`` span

    Text nested too deeply to decode counts as unparseable.

    Raises:
        ValueError: If no JSON object can be parsed
    """
    candidates = [raw_output.strip()]

    fence_match = _FENCE.search(raw_output)
    if fence_match:
        candidates.append(fence_match.group(1).strip())

    object_match = _OBJECT.search(raw_output)
    if object_match:
        candidates.append(object_match.group(0))

    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except (json.JSONDecodeError, RecursionError):
            continue
        if isinstance(parsed, dict):
            return parsed
        raise ValueError(f"Expected a JSON object, got {type(parsed).__name__}")

    preview = raw_output[:200].replace("\n", "\\n")
    raise ValueError(
        f"No valid JSON object in output ({len(raw_output)} chars). Preview: {preview}"
    )


def validate_advice(raw_output: Any, schema: type[AdviceT]) -> AdviceT | ResponseParseError:
    """
    Parse raw AI text into ``schema``.

    Args:
        raw_output: Text returned by a provider
        schema: Advice model the text must match

    Returns:
        Validated model instance, or a ResponseParseError describing why the
        text was rejected. Never raises for bad input.
    """
    name = schema.__name__

    if not isinstance(raw_output, str):
        return ResponseParseError(name, f"expected text, got {type(raw_output).__name__}")

    try:
        data = extract_json(raw_output)
    except ValueError as e:
        logger.warning(f"{name}: {e}")
        return ResponseParseError(name, str(e), raw=raw_output)

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        reason = format_validation_error(e)
        logger.warning(f"{name} schema mismatch: {reason}")
        return ResponseParseError(name, reason, raw=raw_output)
