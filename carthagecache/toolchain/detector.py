"""
Xcode and Swift version detection.

The versions become part of the cache partition name, so they are read once
at startup and carried in the Configuration from then on.
"""

import logging
import re
from typing import Optional

from carthagecache.core.process import ProcessRunner

logger = logging.getLogger(__name__)

XCODE_VERSION_COMMAND = ["llvm-gcc", "-v"]
SWIFT_VERSION_COMMAND = ["xcrun", "swift", "-version"]

_SWIFT_VERSION_RE = re.compile(r"Swift version\s+(\S+)")
_VERSION_RE = re.compile(r"\bversion\s+(\S+)")


def parse_version_banner(line: Optional[str], pattern=_VERSION_RE) -> str:
    """
    Extract the version from a compiler banner line.

    Falls back to the fourth whitespace-separated token when the banner has
    no recognizable ``version X`` phrase.

    Example:
        >>> parse_version_banner("Apple LLVM version 8.0.0 (clang-800.0.38)")
        '8.0.0'
    """
    if not line:
        return ""

    first_line = line.splitlines()[0] if line.splitlines() else ""
    match = pattern.search(first_line)
    if match:
        return match.group(1)

    tokens = first_line.split()
    return tokens[3] if len(tokens) > 3 else ""


def detect_xcode_version(runner: Optional[ProcessRunner] = None) -> str:
    """
    Detect the Xcode toolchain version from ``llvm-gcc -v``.

    Returns:
        Version string, or "" if it could not be determined
    """
    runner = runner or ProcessRunner(echo=False)
    result = runner.run(XCODE_VERSION_COMMAND)
    version = parse_version_banner(result.first_line) if result.succeeded else ""
    if not version:
        logger.warning("Could not detect Xcode version; pass it with -x")
    else:
        logger.debug(f"Detected Xcode version {version}")
    return version


def detect_swift_version(runner: Optional[ProcessRunner] = None) -> str:
    """
    Detect the Swift compiler version from ``xcrun swift -version``.

    Returns:
        Version string, or "" if it could not be determined
    """
    runner = runner or ProcessRunner(echo=False)
    result = runner.run(SWIFT_VERSION_COMMAND)
    if not result.succeeded:
        logger.warning("Could not detect Swift version; pass it with -l")
        return ""

    # Newer toolchains prefix the banner with the swift-driver version
    line = next(
        (line for line in result.output + result.error if "Swift version" in line),
        result.first_line,
    )
    version = parse_version_banner(line, pattern=_SWIFT_VERSION_RE)
    if not version:
        logger.warning("Could not detect Swift version; pass it with -l")
    else:
        logger.debug(f"Detected Swift version {version}")
    return version
