"""
Core functionality for carthage-cache.

This package contains the filesystem and process collaborators, directory
layout helpers and the exception hierarchy that the other packages build on.
"""

from .directory import (
    get_user_cache_dir,
    get_cache_dir,
    get_build_output_dir,
    ensure_cache_partition,
    normalize_project_path,
)

from .filesystem import (
    Filesystem,
    is_metadata_file,
)

from .process import (
    CommandResult,
    ProcessRunner,
)

from .exceptions import (
    CarthageCacheError,
    ConfigurationError,
    CacheError,
    CacheDirectoryError,
    ManifestError,
    FilesystemError,
)

__all__ = [
    "get_user_cache_dir",
    "get_cache_dir",
    "get_build_output_dir",
    "ensure_cache_partition",
    "normalize_project_path",
    "Filesystem",
    "is_metadata_file",
    "CommandResult",
    "ProcessRunner",
    "CarthageCacheError",
    "ConfigurationError",
    "CacheError",
    "CacheDirectoryError",
    "ManifestError",
    "FilesystemError",
]
