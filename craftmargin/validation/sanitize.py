# craftmargin/validation/sanitize.py
"""
Input sanitization and validation utilities.

Converts user-supplied values into validated models and clean prompt text.
Every failure is reported as InputError.
"""

import logging
import math
import re
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ValidationError

from craftmargin.errors import InputError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Control characters other than tab/newline have no business in a prompt
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def require_number(value: Any) -> Any:
    """Reject anything but a real int or float before pydantic coerces it."""
    # "12.50" or True must not be coerced into an amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    return value


Number = Annotated[float, BeforeValidator(require_number)]


def format_validation_error(error: ValidationError) -> str:
    """Render a pydantic ValidationError as one readable line."""
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item.get("loc", ())) or "input"
        parts.append(f"{location}: {item.get('msg', 'invalid value')}")
    return "; ".join(parts)


def validate_model(model_cls: type[ModelT], data: Any) -> ModelT:
    """
    Validate raw data against a pydantic model.

    Args:
        model_cls: Target model class
        data: Model instance, mapping, or anything pydantic accepts

    Returns:
        Validated model instance

    Raises:
        InputError: If validation fails
    """
    if isinstance(data, model_cls):
        return data
    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        raise InputError(f"Invalid {model_cls.__name__}: {format_validation_error(e)}") from e


def sanitize_amount(value: Any, name: str) -> float:
    """
    Validate a monetary or percentage amount.

    Raises:
        InputError: If value is not a finite number >= 0
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InputError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InputError(f"{name} must be finite, got {value}")
    if value < 0:
        raise InputError(f"{name} must be >= 0, got {value}")
    return float(value)


def sanitize_text(text: str, name: str = "text", max_length: int = 2000) -> str:
    """
    Clean free text before it is embedded in a prompt.

    Strips whitespace and control characters, validates non-empty,
    and truncates to max_length.

    Raises:
        InputError: If text is empty after cleaning
    """
    if not isinstance(text, str):
        raise InputError(f"{name} must be a string, got {type(text).__name__}")

    cleaned = _CONTROL_CHARS.sub("", text).strip()
    if not cleaned:
        raise InputError(f"{name} cannot be empty")

    if len(cleaned) > max_length:
        logger.warning(f"{name} truncated from {len(cleaned)} to {max_length} characters")
        cleaned = cleaned[:max_length]

    return cleaned
