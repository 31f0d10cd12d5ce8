"""Cache partition key."""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath


@dataclass(frozen=True)
class ToolchainKey:
    """
    Identifies one cache partition.

    Frameworks built by different Xcode or Swift versions, or for different
    platforms, are not binary compatible, so each combination gets its own
    directory and entries are never shared between them.

    Attributes:
        xcode_version: Xcode (Apple LLVM) version, e.g. '15.0.0'
        swift_version: Swift compiler version, e.g. '5.9'
        platform: Carthage platform name, e.g. 'iOS'

    Example:
        >>> ToolchainKey("15.0.0", "5.9", "iOS").relative_path
        PurePosixPath('X15.0.0_S5.9/iOS')
    """

    xcode_version: str
    swift_version: str
    platform: str

    @property
    def toolchain_dir(self) -> str:
        return f"X{self.xcode_version}_S{self.swift_version}"

    @property
    def relative_path(self) -> PurePosixPath:
        return PurePosixPath(self.toolchain_dir) / self.platform

    def partition(self, cache_dir: Path) -> Path:
        """Get this key's directory under the carthage-cache directory."""
        return Path(cache_dir) / self.toolchain_dir / self.platform

    def __str__(self) -> str:
        return str(self.relative_path)
