"""
Decides which dependencies need building.

A dependency is cached only when the exact ``(display_key, version)`` pair
is present; another cached version of the same library does not count.
"""

import logging
from typing import Iterable, List, Set, Tuple

from carthagecache.manifest.identity import LibraryIdentity

logger = logging.getLogger(__name__)


def _unique(libraries: Iterable[LibraryIdentity]) -> List[LibraryIdentity]:
    seen: Set[Tuple[str, str]] = set()
    unique = []
    for library in libraries:
        if library.cache_key not in seen:
            seen.add(library.cache_key)
            unique.append(library)
    return unique


def missing_keys(
    required: Iterable[LibraryIdentity], cached: Iterable[LibraryIdentity]
) -> Set[Tuple[str, str]]:
    """
    Cache keys that are required but not cached.

    Example:
        >>> a1 = LibraryIdentity("A", "1")
        >>> b2 = LibraryIdentity("B", "2")
        >>> missing_keys([a1, b2], [a1])
        {('B', '2')}
    """
    cached_keys = {library.cache_key for library in cached}
    return {library.cache_key for library in required} - cached_keys


def reconcile(
    required: Iterable[LibraryIdentity],
    cached: Iterable[LibraryIdentity],
    force: bool = False,
) -> List[LibraryIdentity]:
    """
    Compute the build queue.

    Args:
        required: Identities from Cartfile.resolved
        cached: Identities found in the cache
        force: Queue every required identity

    Returns:
        Required identities to build, in manifest order, one per cache key
    """
    required = _unique(required)
    if force:
        logger.debug(f"Force rebuild of {len(required)} dependencies")
        return required

    missing = missing_keys(required, cached)
    queue = [library for library in required if library.cache_key in missing]
    logger.debug(
        f"{len(queue)} of {len(required)} dependencies missing from the cache"
    )
    return queue
