"""
Run configuration for carthage-cache.

Configuration is built once at startup from three layers (built-in defaults,
the YAML config file, command-line flags) and passed to every component.
Toolchain versions that no layer supplies are detected here, once.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from carthagecache.cache.toolchain_key import ToolchainKey
from carthagecache.config.parser import find_config_file, parse_config_file
from carthagecache.core.directory import (
    CARTFILE,
    CARTFILE_RESOLVED,
    get_build_output_dir,
    get_cache_dir,
)
from carthagecache.core.exceptions import ConfigurationError
from carthagecache.core.process import DEFAULT_LAUNCHER, ProcessRunner
from carthagecache.toolchain.detector import (
    detect_swift_version,
    detect_xcode_version,
)

logger = logging.getLogger(__name__)

DEFAULT_PLATFORM = "iOS"

DEFAULTS: Dict[str, Any] = {
    "platform": DEFAULT_PLATFORM,
    "shell": DEFAULT_LAUNCHER,
    "force": False,
    "use_ssh": True,
    "verbose": False,
    "cache_root": None,
    "xcode_version": None,
    "swift_version": None,
}


@dataclass(frozen=True)
class Configuration:
    """
    Immutable settings for one run.

    Attributes:
        project_path: Directory containing Cartfile.resolved
        xcode_version: Xcode version used in the cache partition name
        swift_version: Swift version used in the cache partition name
        platform: Carthage platform to build for
        shell: Launcher used to run external commands
        force: Rebuild every dependency even if cached
        use_ssh: Pass --use-ssh when resolving dependencies
        verbose: Pass --verbose to carthage build
        cache_root: Base cache directory (default: per-user cache dir)
    """

    project_path: Path
    xcode_version: str
    swift_version: str
    platform: str = DEFAULT_PLATFORM
    shell: str = DEFAULT_LAUNCHER
    force: bool = False
    use_ssh: bool = True
    verbose: bool = False
    cache_root: Optional[Path] = None

    @property
    def toolchain_key(self) -> ToolchainKey:
        return ToolchainKey(self.xcode_version, self.swift_version, self.platform)

    @property
    def cache_dir(self) -> Path:
        return get_cache_dir(self.cache_root)

    @property
    def cache_partition(self) -> Path:
        return self.toolchain_key.partition(self.cache_dir)

    @property
    def resolved_manifest(self) -> Path:
        return self.project_path / CARTFILE_RESOLVED

    @property
    def declared_manifest(self) -> Path:
        return self.project_path / CARTFILE

    @property
    def build_output_dir(self) -> Path:
        return get_build_output_dir(self.project_path, self.platform)


def resolve_configuration(
    project_path: Path,
    overrides: Optional[Dict[str, Any]] = None,
    config_file: Optional[Path] = None,
    runner: Optional[ProcessRunner] = None,
) -> Configuration:
    """
    Merge defaults, the config file and command-line overrides.

    Args:
        project_path: Project directory
        overrides: Values from the command line; None means "not given"
        config_file: Explicit config file (must exist). If omitted,
            ``<project>/.carthage-cache.yaml`` is used when present.
        runner: Process runner for toolchain detection

    Returns:
        Fully populated Configuration

    Raises:
        ConfigurationError: If the config file or a value is invalid

    Example:
        >>> config = resolve_configuration(Path("."), {"platform": "tvOS", "xcode_version": "15.0.0", "swift_version": "5.9"})
        >>> str(config.toolchain_key)
        'X15.0.0_S5.9/tvOS'
    """
    project_path = Path(project_path)
    values = dict(DEFAULTS)

    if config_file is not None:
        values.update(parse_config_file(Path(config_file)))
    else:
        default_file = find_config_file(project_path)
        if default_file.exists():
            logger.debug(f"Loading configuration from {default_file}")
            values.update(parse_config_file(default_file))

    for key, value in (overrides or {}).items():
        if key not in DEFAULTS:
            raise ConfigurationError(f"Unknown configuration option: {key}")
        if value is not None:
            values[key] = value

    if not values["platform"]:
        raise ConfigurationError("Platform cannot be empty")
    if not values["shell"]:
        raise ConfigurationError("Shell environment cannot be empty")

    if values["xcode_version"] is None or values["swift_version"] is None:
        detector = runner or ProcessRunner(launcher=values["shell"], echo=False)
        if values["xcode_version"] is None:
            values["xcode_version"] = detect_xcode_version(detector)
        if values["swift_version"] is None:
            values["swift_version"] = detect_swift_version(detector)

    cache_root = values["cache_root"]
    config = Configuration(
        project_path=project_path,
        xcode_version=str(values["xcode_version"]),
        swift_version=str(values["swift_version"]),
        platform=values["platform"],
        shell=values["shell"],
        force=bool(values["force"]),
        use_ssh=bool(values["use_ssh"]),
        verbose=bool(values["verbose"]),
        cache_root=Path(cache_root).expanduser() if cache_root else None,
    )
    logger.debug(f"Configuration: {config}")
    return config
