"""
Enumeration of cached frameworks.

The cache partition for a toolchain key is laid out as
``<library>/<version>/<framework contents>``. An entry counts as cached only
when its version directory holds something other than OS housekeeping files,
so an interrupted store never masks a missing build.
"""

import logging
from pathlib import Path
from typing import List, Optional

from packaging.version import InvalidVersion, Version

from carthagecache.cache.toolchain_key import ToolchainKey
from carthagecache.core.exceptions import FilesystemError
from carthagecache.core.filesystem import Filesystem
from carthagecache.manifest.identity import LibraryIdentity

logger = logging.getLogger(__name__)


def list_subdirectories(filesystem: Filesystem, path: Path) -> List[str]:
    """
    List immediate subdirectory names of path.

    Missing or unreadable directories yield an empty list.
    """
    try:
        return filesystem.list_subdirectories(path)
    except FilesystemError as e:
        logger.debug(f"Skipping cache directory: {e}")
        return []


def list_nested_subdirectories(
    filesystem: Filesystem, path: Path, name: str
) -> List[str]:
    """List immediate subdirectory names of ``path / name``."""
    return list_subdirectories(filesystem, Path(path) / name)


def version_sort_key(value: str):
    """
    Sort key ordering release-like tags numerically, others lexically after.

    Example:
        >>> sorted(["v1.10.0", "1.9.0", "main"], key=version_sort_key)
        ['1.9.0', 'v1.10.0', 'main']
    """
    try:
        return (0, Version(value), value)
    except InvalidVersion:
        return (1, None, value)


class CacheIndex:
    """
    Read-only view of the cache directory tree.

    Attributes:
        cache_dir: The carthage-cache directory (holds X*_S* partitions)
        filesystem: Filesystem collaborator

    Example:
        >>> index = CacheIndex(Path("~/Library/Caches/carthage-cache"))
        >>> key = ToolchainKey("15.0.0", "5.9", "iOS")
        >>> [str(lib) for lib in index.entries(key)]
        ['Alamofire@5.8.1']
    """

    def __init__(self, cache_dir: Path, filesystem: Optional[Filesystem] = None):
        self.cache_dir = Path(cache_dir)
        self.filesystem = filesystem or Filesystem()

    def partition(self, key: ToolchainKey) -> Path:
        return key.partition(self.cache_dir)

    def entry_path(self, key: ToolchainKey, library: LibraryIdentity) -> Path:
        """Directory holding one library version for a toolchain key."""
        return self.partition(key) / library.display_key / library.version

    def entries(self, key: ToolchainKey) -> List[LibraryIdentity]:
        """
        Enumerate cached library versions for a toolchain key.

        Returns:
            Identities without source_path, sorted by (name, version)
        """
        partition = self.partition(key)
        cached = [
            LibraryIdentity(name=name, version=version)
            for name in list_subdirectories(self.filesystem, partition)
            for version in list_nested_subdirectories(
                self.filesystem, partition, name
            )
            if self.filesystem.contains_files(partition / name / version)
        ]
        logger.debug(f"Found {len(cached)} cached entries for {key}")
        return cached

    def versions_for(self, key: ToolchainKey, display_key: str) -> List[str]:
        """Cached versions of one library, oldest first."""
        library_dir = self.partition(key) / display_key
        versions = [
            version
            for version in list_subdirectories(self.filesystem, library_dir)
            if self.filesystem.contains_files(library_dir / version)
        ]
        return sorted(versions, key=version_sort_key)
