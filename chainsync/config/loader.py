"""
Configuration loader module for ChainSync.

This module provides utilities for loading and validating configuration files.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from chainsync.config.models import ChainSyncConfig
from chainsync.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_LOCATIONS = [
    "chainsync.toml",
    "config/chainsync.yaml",
]

ENV_OVERRIDES = {
    "CHAINSYNC_VERBOSE": "verbose",
    "CHAINSYNC_TIMEOUT_MS": "timeout",
    "CHAINSYNC_MAX_RETRIES": "max_retries",
}


def _read_config_file(config_file: Path) -> Dict[str, Any]:
    """Parse a TOML or YAML file into a dict."""
    try:
        if config_file.suffix in (".yaml", ".yml"):
            with open(config_file) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError, yaml.YAMLError) as e:
        logger.error(f"Error parsing configuration file: {e}")
        raise ConfigurationError(
            f"Invalid configuration: {e}", config_file=str(config_file)
        ) from e

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            "Configuration must be a mapping", config_file=str(config_file)
        )

    # Either a [chainsync] table or bare top-level keys
    section = config_dict.get("chainsync", config_dict)
    if not isinstance(section, dict):
        raise ConfigurationError(
            "The 'chainsync' section must be a mapping", config_file=str(config_file)
        )
    return dict(section)


def _find_config_file(config_path: Optional[str]) -> Optional[Path]:
    if config_path:
        config_file = Path(config_path).expanduser().resolve()
        if not config_file.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                config_file=str(config_file),
            )
        return config_file

    locations = [os.environ.get("CHAINSYNC_CONFIG", "")] + DEFAULT_CONFIG_LOCATIONS
    for loc in locations:
        if not loc:
            continue
        path = Path(loc).expanduser()
        if path.exists():
            return path.resolve()
    return None


def load_config(config_path: Optional[str] = None) -> ChainSyncConfig:
    """
    Load configuration from a file and environment variables.

    Args:
        config_path: Path to a TOML or YAML config file. If None, the
            default locations are searched and defaults are used when
            none exists.

    Returns:
        Validated configuration object.

    Raises:
        ConfigurationError: If an explicit file doesn't exist, or the
            configuration is invalid.
    """
    load_dotenv(find_dotenv(usecwd=True))

    config_file = _find_config_file(config_path)
    config_data: Dict[str, Any] = {}
    if config_file is not None:
        logger.debug(f"Loading configuration from {config_file}")
        config_data = _read_config_file(config_file)

    env_values = {
        field: os.environ[env_var]
        for env_var, field in ENV_OVERRIDES.items()
        if env_var in os.environ
    }

    try:
        # File keys may be aliases; env values are keyed by field name
        return ChainSyncConfig(**config_data).merged(**env_values)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e}",
            config_file=str(config_file) if config_file else None,
        ) from e
