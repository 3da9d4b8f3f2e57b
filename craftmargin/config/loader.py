# craftmargin/config/loader.py
"""
Configuration loading with auto-creation of defaults.

Uses platformdirs for cross-platform config directory management. A broken
file is reported as ConfigError naming the offending key, never half-applied.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from platformdirs import user_config_path
from pydantic import ValidationError

from craftmargin.errors import ConfigError
from craftmargin.validation import format_validation_error

from .schema import CraftMarginConfig

logger = logging.getLogger(__name__)


def get_config_path() -> Path:
    """Get path to config file, ensuring config directory exists."""
    config_dir = user_config_path("craftmargin", ensure_exists=True)
    return config_dir / "config.yaml"


def write_default_config(config_path: Path) -> CraftMarginConfig:
    """Write the default settings to ``config_path`` and return them."""
    default_config = CraftMarginConfig()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w") as f:
        yaml.safe_dump(
            default_config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False
        )

    logger.info(f"Created default config at {config_path}")
    return default_config


def _read_yaml(config_path: Path) -> dict[str, Any]:
    try:
        with config_path.open("r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(config_path, f"not valid YAML ({e})") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        kind = type(data).__name__
        raise ConfigError(config_path, f"expected a mapping at top level, got {kind}")
    return data


def load_config(config_path: Path | None = None) -> CraftMarginConfig:
    """
    Load configuration from YAML file.

    If config file doesn't exist, creates it with defaults.

    Args:
        config_path: Explicit config file (defaults to the platform config dir)

    Returns:
        Validated CraftMarginConfig

    Raises:
        ConfigError: If the file is not YAML or a setting is invalid,
            e.g. ``pricing.target_margin: Input should be less than 100``
    """
    config_path = config_path or get_config_path()

    if not config_path.exists():
        return write_default_config(config_path)

    config_data = _read_yaml(config_path)
    try:
        config = CraftMarginConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigError(config_path, format_validation_error(e)) from e

    logger.info(f"Loaded config from {config_path}")
    return config
