"""
File system operations used by carthage-cache.

The Filesystem class is the single seam through which the cache index and
the sync executor touch the disk. Operations that callers treat as
best-effort (remove, make_dirs) report failure through their return value;
operations whose failure the caller must log (move, copy_tree, listing)
raise FilesystemError.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import List, Optional, Union

from carthagecache.core.exceptions import FilesystemError

logger = logging.getLogger(__name__)

# Housekeeping entries written by Finder/Explorer, never real cache content
METADATA_FILES = frozenset({".DS_Store", "Thumbs.db", "desktop.ini"})


def is_metadata_file(name: str) -> bool:
    """
    Check if a directory entry is OS housekeeping rather than content.

    Example:
        >>> is_metadata_file(".DS_Store")
        True
        >>> is_metadata_file("._Alamofire.framework")
        True
    """
    return name in METADATA_FILES or name.startswith("._")


class Filesystem:
    """
    Thin wrapper over os/shutil for the operations the cache needs.

    Example:
        >>> fs = Filesystem()
        >>> fs.make_dirs(Path("/tmp/cache/X15.0_S5.9/iOS"))
        True
        >>> fs.list_subdirectories(Path("/tmp/cache/X15.0_S5.9/iOS"))
        []
    """

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def read_text(self, path: Path, encoding: str = "utf-8") -> Optional[str]:
        """
        Read a text file.

        Returns:
            File contents, or None if the file does not exist

        Raises:
            FilesystemError: If the file exists but cannot be read
        """
        path = Path(path)
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise FilesystemError(f"Failed to read {path}: {e}")

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> bool:
        try:
            Path(path).write_text(content, encoding=encoding)
            return True
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            return False

    def make_dirs(self, path: Path) -> bool:
        """
        Create a directory and its parents.

        Returns:
            True if the directory exists afterwards, False otherwise
        """
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
            return True
        except OSError as e:
            logger.error(f"Error creating directory {path}: {e}")
            return False

    def remove(self, path: Path) -> bool:
        """
        Remove a file, symlink or directory tree if present.

        Returns:
            True if nothing is left at path, False otherwise
        """
        path = Path(path)
        try:
            if path.is_symlink() or path.is_file():
                path.unlink()
            elif path.is_dir():
                shutil.rmtree(path)
            return True
        except OSError as e:
            logger.debug(f"Failed to remove {path}: {e}")
            return False

    def move(self, source: Path, destination: Path) -> None:
        """
        Move source to destination, which must not exist yet.

        Raises:
            FilesystemError: If the move fails
        """
        source = Path(source)
        destination = Path(destination)
        if not source.exists():
            raise FilesystemError(f"Nothing to move: {source} does not exist")
        if destination.exists() or destination.is_symlink():
            raise FilesystemError(f"Destination already exists: {destination}")
        try:
            shutil.move(str(source), str(destination))
        except (OSError, shutil.Error) as e:
            raise FilesystemError(f"Failed to move {source} to {destination}: {e}")

    def copy_tree(self, source: Path, destination: Path) -> None:
        """
        Recursively merge the contents of source into destination.

        Existing files and symlinks at the destination are replaced, which
        matches ``cp -Rf source/. destination``. Symlinks are copied as links.

        Raises:
            FilesystemError: If source is not a directory or any entry fails
        """
        source = Path(source)
        destination = Path(destination)
        if not source.is_dir():
            raise FilesystemError(f"Source is not a directory: {source}")

        errors: List[str] = []
        _merge_tree(source, destination, errors)
        if errors:
            raise FilesystemError(
                f"Failed to copy {source} to {destination}: " + "; ".join(errors)
            )

    def list_subdirectories(self, path: Path) -> List[str]:
        """
        List names of immediate subdirectories, sorted, skipping housekeeping.

        Raises:
            FilesystemError: If the directory cannot be enumerated
        """
        try:
            with os.scandir(path) as it:
                names = [
                    entry.name
                    for entry in it
                    if entry.is_dir() and not is_metadata_file(entry.name)
                ]
        except OSError as e:
            raise FilesystemError(f"Failed to list {path}: {e}")
        return sorted(names)

    def contains_files(self, path: Path) -> bool:
        """
        Check if a directory holds at least one non-housekeeping entry.

        Unreadable or missing directories count as empty.
        """
        try:
            with os.scandir(path) as it:
                return any(not is_metadata_file(entry.name) for entry in it)
        except OSError:
            return False


def _merge_tree(source: Path, destination: Path, errors: List[str]) -> None:
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        errors.append(f"{destination}: {e}")
        return

    try:
        entries = list(os.scandir(source))
    except OSError as e:
        errors.append(f"{source}: {e}")
        return

    for entry in entries:
        target = destination / entry.name
        try:
            if entry.is_symlink():
                _clear(target)
                os.symlink(os.readlink(entry.path), target)
            elif entry.is_dir():
                if target.is_symlink() or target.is_file():
                    target.unlink()
                _merge_tree(Path(entry.path), target, errors)
            else:
                _clear(target)
                shutil.copy2(entry.path, target)
        except OSError as e:
            errors.append(f"{entry.path}: {e}")


def _clear(path: Union[str, Path]) -> None:
    path = Path(path)
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)
