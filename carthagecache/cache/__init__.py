"""
On-disk framework cache for carthage-cache.
"""

from carthagecache.cache.toolchain_key import ToolchainKey
from carthagecache.cache.index import (
    CacheIndex,
    list_subdirectories,
    list_nested_subdirectories,
    version_sort_key,
)

__all__ = [
    "ToolchainKey",
    "CacheIndex",
    "list_subdirectories",
    "list_nested_subdirectories",
    "version_sort_key",
]
