"""
Configuration for carthage-cache.
"""

from carthagecache.config.parser import (
    CONFIG_FILE_NAME,
    find_config_file,
    parse_config_file,
)
from carthagecache.config.settings import (
    DEFAULT_PLATFORM,
    Configuration,
    resolve_configuration,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "find_config_file",
    "parse_config_file",
    "DEFAULT_PLATFORM",
    "Configuration",
    "resolve_configuration",
]
