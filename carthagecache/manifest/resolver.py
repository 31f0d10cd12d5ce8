"""
Cartfile and Cartfile.resolved parsing.

Cartfile.resolved holds one dependency per line::

    github "Alamofire/Alamofire" "5.8.1"
    git "https://example.com/Foo.git" "v2.0.0"
    binary "https://example.com/specs/Bar.json" "1.2.0"

Lines that don't split into exactly three fields are skipped without
complaint. A missing manifest reads as an empty list.
"""

import logging
from pathlib import Path
from typing import List, Optional

from carthagecache.core.exceptions import FilesystemError, ManifestError
from carthagecache.core.filesystem import Filesystem
from carthagecache.manifest.identity import (
    LibraryIdentity,
    has_scheme,
    normalize_name,
    normalize_version,
    strip_quotes,
    strip_suffix,
)

logger = logging.getLogger(__name__)


def parse_resolved_line(line: str) -> Optional[LibraryIdentity]:
    """
    Parse one Cartfile.resolved record.

    Returns:
        LibraryIdentity, or None if the line is not a three-field record

    Example:
        >>> parse_resolved_line('git "https://x/y/z.json" "1.2.0"').version
        '1.2.0'
    """
    fields = line.split()
    if len(fields) != 3:
        return None

    _, origin, version = fields
    return LibraryIdentity(
        name=normalize_name(origin),
        version=normalize_version(version),
        source_path=strip_quotes(origin),
    )


def parse_resolved_manifest(text: str) -> List[LibraryIdentity]:
    """Parse Cartfile.resolved content into identities, in file order."""
    libraries = []
    for line in text.splitlines():
        library = parse_resolved_line(line)
        if library is not None:
            libraries.append(library)
    return libraries


def parse_declared_line(line: str) -> Optional[str]:
    """
    Extract the bare repository name from one Cartfile declaration.

    Example:
        >>> parse_declared_line('github "ReactiveX/RxSwift" ~> 6.0')
        'RxSwift'
        >>> parse_declared_line('git "https://github.com/Foo/Bar.git" "main"')
        'Bar'
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    fields = stripped.split()
    if len(fields) < 2:
        return None

    origin = strip_quotes(fields[1])
    if not has_scheme(origin) and ":" not in origin:
        repo_path = origin
    else:
        repo_path = origin.split(":")[-1]

    repo_path = strip_suffix(repo_path, ".git")
    repo_path = repo_path.replace("//", "").replace("github.com/", "")
    segments = [s for s in repo_path.split("/") if s]
    if not segments:
        return None
    return strip_suffix(strip_suffix(segments[-1], ".git"), ".json")


def parse_declared_manifest(text: str) -> List[str]:
    """Parse Cartfile content into repository short names, in file order."""
    names = []
    for line in text.splitlines():
        name = parse_declared_line(line)
        if name is not None:
            names.append(name)
    return names


def load_manifest(
    path: Path, filesystem: Optional[Filesystem] = None
) -> Optional[str]:
    """
    Read a manifest file.

    Returns:
        File contents, or None if the file does not exist

    Raises:
        ManifestError: If the file exists but cannot be read or decoded
    """
    filesystem = filesystem or Filesystem()
    try:
        return filesystem.read_text(path)
    except FilesystemError as e:
        raise ManifestError(f"Cannot read manifest {path}: {e}") from e


def _read_manifest(path: Path, filesystem: Optional[Filesystem]) -> Optional[str]:
    try:
        text = load_manifest(path, filesystem)
    except ManifestError as e:
        logger.warning(f"Ignoring unreadable manifest: {e}")
        return None

    if text is None:
        logger.debug(f"Manifest not found: {path}")
    return text


def read_resolved_manifest(
    path: Path, filesystem: Optional[Filesystem] = None
) -> List[LibraryIdentity]:
    """
    Read and parse a Cartfile.resolved file.

    Args:
        path: Path to Cartfile.resolved
        filesystem: Filesystem collaborator (default: real filesystem)

    Returns:
        Parsed identities; empty if the file is missing or unreadable
    """
    text = _read_manifest(path, filesystem)
    if text is None:
        return []

    libraries = parse_resolved_manifest(text)
    logger.debug(f"Read {len(libraries)} resolved dependencies from {path}")
    return libraries


def read_declared_manifest(
    path: Path, filesystem: Optional[Filesystem] = None
) -> List[str]:
    """Read a Cartfile; empty if the file is missing or unreadable."""
    text = _read_manifest(path, filesystem)
    if text is None:
        return []
    return parse_declared_manifest(text)
