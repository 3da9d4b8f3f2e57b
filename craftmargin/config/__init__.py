# craftmargin/config/__init__.py
"""Configuration system for craftmargin."""

from .loader import get_config_path, load_config
from .schema import AdvisoryConfig, CraftMarginConfig, OutputConfig, PricingConfig

__all__ = [
    "CraftMarginConfig",
    "PricingConfig",
    "AdvisoryConfig",
    "OutputConfig",
    "load_config",
    "get_config_path",
]
