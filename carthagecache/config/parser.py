"""YAML configuration file parser for carthage-cache.

A project may keep defaults in ``.carthage-cache.yaml`` next to its Cartfile::

    platform: iOS
    xcode_version: "15.0.0"
    swift_version: "5.9"
    shell: /usr/bin/env
    use_ssh: false
    cache_root: ~/Library/Caches
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from carthagecache.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".carthage-cache.yaml"

STRING_KEYS = ("platform", "xcode_version", "swift_version", "shell", "cache_root")
BOOL_KEYS = ("use_ssh", "verbose")


def parse_config_file(config_path: Path) -> Dict[str, Any]:
    """
    Parse and validate a carthage-cache YAML configuration file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Dictionary holding only recognized keys

    Raises:
        ConfigurationError: If the file is missing, not valid YAML, or has
            values of the wrong type
    """
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}")

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration in {config_path} must be a mapping, got {type(data).__name__}"
        )

    return _validate(data, config_path)


def _validate(data: Dict[str, Any], config_path: Path) -> Dict[str, Any]:
    config: Dict[str, Any] = {}

    for key, value in data.items():
        if key in STRING_KEYS:
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                # Unquoted versions like 5.9 load as floats
                value = str(value)
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"'{key}' in {config_path} must be a string"
                )
            config[key] = value
        elif key in BOOL_KEYS:
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"'{key}' in {config_path} must be true or false"
                )
            config[key] = value
        else:
            logger.debug(f"Ignoring unknown configuration key '{key}'")

    if "cache_root" in config:
        config["cache_root"] = Path(config["cache_root"]).expanduser()

    return config


def find_config_file(project_path: Path) -> Path:
    """Get the default configuration file location for a project."""
    return Path(project_path) / CONFIG_FILE_NAME
