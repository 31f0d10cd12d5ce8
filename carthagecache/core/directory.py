"""
Directory layout for carthage-cache.

This module resolves the per-user cache location and the project-side
Carthage paths, and creates the cache partition for a toolchain.

Directory Structure:
    Cache (<user cache dir>/carthage-cache/):
        X<xcode>_S<swift>/<platform>/<library>/<version>/  : built frameworks

    Project (<project-root>/):
        Cartfile              : declared dependencies
        Cartfile.resolved     : resolved dependencies
        Carthage/Build/<platform>/ : build output restored from the cache
"""

import logging
import os
import platform
from pathlib import Path

from carthagecache.core.exceptions import CacheDirectoryError

logger = logging.getLogger(__name__)

CACHE_DIR_NAME = "carthage-cache"
CARTFILE = "Cartfile"
CARTFILE_RESOLVED = "Cartfile.resolved"
CARTHAGE_DIR = "Carthage"


def get_user_cache_dir() -> Path:
    """
    Get the platform-specific per-user cache directory.

    Returns:
        Path: The user cache directory.
            - macOS: ~/Library/Caches
            - Windows: %LOCALAPPDATA% (or ~/AppData/Local)
            - Linux: $XDG_CACHE_HOME (or ~/.cache)

    Example:
        >>> get_user_cache_dir()
        PosixPath('/Users/user/Library/Caches')  # on macOS
    """
    system = platform.system()
    if system == "Darwin":
        return Path.home() / "Library" / "Caches"
    if system == "Windows":
        local = os.environ.get("LOCALAPPDATA")
        return Path(local) if local else Path.home() / "AppData" / "Local"

    xdg = os.environ.get("XDG_CACHE_HOME")
    return Path(xdg) if xdg else Path.home() / ".cache"


def get_cache_dir(cache_root: Path = None) -> Path:
    """
    Get the carthage-cache directory under a cache root.

    Args:
        cache_root: Base directory (default: the per-user cache directory)

    Returns:
        Path: <cache_root>/carthage-cache
    """
    if cache_root is None:
        cache_root = get_user_cache_dir()
    return Path(cache_root) / CACHE_DIR_NAME


def get_build_output_dir(project_path: Path, platform_name: str) -> Path:
    """Get Carthage's build output directory for one platform."""
    return Path(project_path) / CARTHAGE_DIR / "Build" / platform_name


def ensure_cache_partition(partition: Path) -> Path:
    """
    Create the cache partition directory if it doesn't exist.

    Args:
        partition: Cache directory for one toolchain key

    Returns:
        Path: The partition directory.

    Raises:
        CacheDirectoryError: If the directory cannot be created.
    """
    try:
        partition.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CacheDirectoryError(partition, str(e))

    if not partition.is_dir():
        raise CacheDirectoryError(partition, "path exists and is not a directory")

    logger.debug(f"Cache partition ready at {partition}")
    return partition


def normalize_project_path(raw_path: str) -> Path:
    """
    Normalize a user-supplied project path.

    A trailing ``Cartfile.resolved`` component and trailing separators are
    removed, so both the directory and the lock file itself can be passed.

    Example:
        >>> normalize_project_path("/work/App/Cartfile.resolved")
        PosixPath('/work/App')
    """
    path = raw_path
    if CARTFILE_RESOLVED in path:
        path = path.split(CARTFILE_RESOLVED)[0]
    path = path.rstrip("/\\")
    if not path:
        return Path("/") if raw_path.startswith("/") else Path(".")
    return Path(path)
