# craftmargin/models/__init__.py
"""
Data models for craftmargin tool responses.

Pricing and advice models live with their subsystems; these wrap them in
discriminated success/error results.
"""

from craftmargin.models.responses import (
    AdvisoryErrorResponse,
    AdvisoryResponse,
    ErrorResponse,
    FeeComparisonResponse,
    OptimalPriceResponse,
    ProfitResponse,
)

__all__ = [
    "ErrorResponse",
    "AdvisoryErrorResponse",
    "ProfitResponse",
    "OptimalPriceResponse",
    "FeeComparisonResponse",
    "AdvisoryResponse",
]
