"""
Dependency manifest parsing for carthage-cache.

Turns Cartfile.resolved records into LibraryIdentity values and Cartfile
declarations into repository short names.
"""

from carthagecache.manifest.identity import (
    LibraryIdentity,
    normalize_name,
    normalize_version,
)

from carthagecache.manifest.resolver import (
    parse_resolved_line,
    parse_resolved_manifest,
    parse_declared_line,
    parse_declared_manifest,
    read_resolved_manifest,
    read_declared_manifest,
    load_manifest,
)

__all__ = [
    "LibraryIdentity",
    "normalize_name",
    "normalize_version",
    "parse_resolved_line",
    "parse_resolved_manifest",
    "parse_declared_line",
    "parse_declared_manifest",
    "read_resolved_manifest",
    "read_declared_manifest",
    "load_manifest",
]
