# craftmargin/validation/__init__.py
"""Input validation and sanitization utilities."""

from .sanitize import (
    Number,
    format_validation_error,
    require_number,
    sanitize_amount,
    sanitize_text,
    validate_model,
)

__all__ = [
    "Number",
    "require_number",
    "validate_model",
    "sanitize_amount",
    "sanitize_text",
    "format_validation_error",
]
