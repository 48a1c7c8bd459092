"""Configuration loader with validation and singleton access."""

import logging
import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from .models import AppConfig

logger = logging.getLogger(__name__)

# Global config singleton
_config: Optional[AppConfig] = None


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    """Parse a YAML file into a mapping; an empty file yields an empty mapping."""
    with open(config_path, 'r') as f:
        raw_config = yaml.safe_load(f)

    if raw_config is None:
        return {}
    if not isinstance(raw_config, dict):
        raise ValueError(
            f"Invalid configuration: expected a mapping at top level, got {type(raw_config).__name__}"
        )
    return raw_config


def load_config(config_path: str | Path) -> AppConfig:
    """
    Load and validate configuration from YAML file, replacing any
    previously loaded configuration.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the file is not a mapping or validation fails
        yaml.YAMLError: If YAML parsing fails
    """
    global _config

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.info(f"Loading configuration from: {config_path}")
    raw_config = _read_yaml(config_path)

    try:
        _config = AppConfig(**raw_config)
    except Exception as e:
        logger.error(f"Configuration validation failed: {e}")
        raise ValueError(f"Invalid configuration: {e}") from e

    logger.info("Configuration loaded successfully:")
    for section, settings in _config:
        logger.info(f"  {section}: {settings.model_dump(exclude_none=True)}")

    return _config


def get_config() -> AppConfig:
    """
    Get the current loaded configuration.

    Raises:
        RuntimeError: If config hasn't been loaded yet
    """
    if _config is None:
        raise RuntimeError(
            "Configuration not loaded. Call load_config() first."
        )
    return _config


def reset_config() -> None:
    """Forget the loaded configuration."""
    global _config
    _config = None
