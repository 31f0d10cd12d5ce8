"""Reusable cache directory fixtures for testing.

The cache layout mirrors the real one:
``<root>/carthage-cache/X<xcode>_S<swift>/<platform>/<library>/<version>/``
"""

import pytest
from pathlib import Path

from carthagecache.cache.toolchain_key import ToolchainKey


TEST_KEY = ToolchainKey("15.0.0", "5.9", "iOS")


def add_cache_entry(
    cache_dir: Path,
    library: str,
    version: str,
    key: ToolchainKey = TEST_KEY,
    files=None,
) -> Path:
    """
    Create one cache entry holding a fake framework.

    Args:
        cache_dir: The carthage-cache directory
        library: Library display key
        version: Version directory name
        key: Toolchain key for the partition
        files: Names to create inside the version directory
            (default: ``<library>.framework/<library>``)

    Returns:
        Path to the version directory
    """
    entry = key.partition(cache_dir) / library / version
    entry.mkdir(parents=True, exist_ok=True)
    if files is None:
        framework = entry / f"{library}.framework"
        framework.mkdir()
        (framework / library).write_text(f"{library} {version}")
    else:
        for name in files:
            (entry / name).write_text("")
    return entry


@pytest.fixture
def cache_root(tmp_path) -> Path:
    """Create an empty base cache directory (the per-user cache dir stand-in)."""
    root = tmp_path / "Caches"
    root.mkdir()
    return root


@pytest.fixture
def cache_dir(cache_root) -> Path:
    """The carthage-cache directory under cache_root."""
    return cache_root / "carthage-cache"


@pytest.fixture
def populated_cache(cache_dir) -> Path:
    """
    Create a cache with Alamofire 5.8.1 and RxSwift 6.5.0 for TEST_KEY.

    Also creates an empty RxSwift 6.6.0 directory and a tvOS partition entry
    that must not be visible for the iOS key.
    """
    add_cache_entry(cache_dir, "Alamofire", "5.8.1")
    add_cache_entry(cache_dir, "RxSwift", "6.5.0")
    (TEST_KEY.partition(cache_dir) / "RxSwift" / "6.6.0").mkdir(parents=True)
    add_cache_entry(
        cache_dir, "RxSwift", "6.6.0", key=ToolchainKey("15.0.0", "5.9", "tvOS")
    )
    return cache_dir
