"""
Centralized exception hierarchy for carthage-cache.

Only a failure to prepare the cache directory and an invalid configuration
abort a run; everything else is caught near where it happens and logged.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class CarthageCacheError(Exception):
    """Base exception for all carthage-cache errors."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(CarthageCacheError):
    """Raised when the configuration file or a configuration value is invalid."""

    pass


# ============================================================================
# Cache Exceptions
# ============================================================================


class CacheError(CarthageCacheError):
    """Base exception for cache-related errors."""

    pass


class CacheDirectoryError(CacheError):
    """Raised when the cache partition directory cannot be created."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        msg = f"Cannot create cache directory: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


# ============================================================================
# Manifest Exceptions
# ============================================================================


class ManifestError(CarthageCacheError):
    """Raised when a manifest file exists but cannot be read."""

    pass


# ============================================================================
# Filesystem Exceptions
# ============================================================================


class FilesystemError(CarthageCacheError):
    """Base exception for filesystem operations."""

    pass
