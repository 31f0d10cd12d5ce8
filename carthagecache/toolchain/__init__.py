"""
Toolchain detection for carthage-cache.
"""

from carthagecache.toolchain.detector import (
    detect_xcode_version,
    detect_swift_version,
    parse_version_banner,
)

__all__ = [
    "detect_xcode_version",
    "detect_swift_version",
    "parse_version_banner",
]
