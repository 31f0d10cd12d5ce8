"""
Build, store and restore operations.

Every ``carthage build`` writes to the same ``Carthage/Build/<platform>``
directory, so builds run one at a time and the directory is cleared before
each. Failures are logged and the batch continues with the next library.
"""

import logging
from typing import Iterable, List, Optional

from carthagecache.cache.index import CacheIndex
from carthagecache.config.settings import Configuration
from carthagecache.core.exceptions import FilesystemError
from carthagecache.core.filesystem import Filesystem
from carthagecache.core.process import CommandResult, ProcessRunner
from carthagecache.manifest.identity import LibraryIdentity

logger = logging.getLogger(__name__)

CARTHAGE = "carthage"


def bootstrap_command(config: Configuration) -> List[str]:
    """Command that refreshes Cartfile.resolved and checkouts without building."""
    args = [CARTHAGE, "bootstrap", "--no-build"]
    if config.use_ssh:
        args.append("--use-ssh")
    return args


def build_command(config: Configuration, library: LibraryIdentity) -> List[str]:
    """
    Command that builds a single dependency from source.

    Example:
        >>> build_command(config, LibraryIdentity("Foo/Bar", "1.0", "Foo/Bar"))
        ['carthage', 'build', '--platform', 'iOS', '--no-use-binaries', 'Bar']
    """
    args = [CARTHAGE, "build", "--platform", config.platform, "--no-use-binaries"]
    if config.verbose:
        args.append("--verbose")
    args.append(library.display_key)
    return args


class SyncExecutor:
    """
    Moves frameworks between carthage, the cache and the project.

    Attributes:
        config: Run configuration
        runner: Runs carthage commands
        filesystem: Filesystem collaborator
        index: Cache index used to locate entries
    """

    def __init__(
        self,
        config: Configuration,
        runner: Optional[ProcessRunner] = None,
        filesystem: Optional[Filesystem] = None,
    ):
        self.config = config
        self.runner = runner or ProcessRunner(launcher=config.shell)
        self.filesystem = filesystem or Filesystem()
        self.index = CacheIndex(config.cache_dir, self.filesystem)

    def ensure_manifest_current(self) -> CommandResult:
        """
        Resolve dependencies so Cartfile.resolved matches the Cartfile.

        A failure is logged; the run carries on with whatever
        Cartfile.resolved now contains.
        """
        args = bootstrap_command(self.config)
        logger.debug(f"Running: {' '.join(args)}")
        result = self.runner.run(args, cwd=self.config.project_path)
        if not result.succeeded:
            logger.warning(
                f"Dependency resolution failed with exit status {result.exit_code}; "
                f"{self.config.resolved_manifest.name} may be stale"
            )
        return result

    def build(self, library: LibraryIdentity) -> bool:
        """
        Build one dependency into the project's build output directory.

        Returns:
            True if carthage exited successfully
        """
        self.filesystem.remove(self.config.build_output_dir)

        logger.info(f"Building library {library.name}")
        args = build_command(self.config, library)
        logger.info(f"Running: {' '.join(args)}")
        result = self.runner.run(args, cwd=self.config.project_path)

        if not result.succeeded:
            logger.error(
                f"Building {library} failed with exit status {result.exit_code}"
            )
            for line in result.error:
                logger.debug(f"  {line}")
            return False
        return True

    def store(self, library: LibraryIdentity) -> bool:
        """
        Move the fresh build output into the cache.

        Any previous content for the same version is replaced. If the move
        fails the version directory is still created, empty, which the cache
        index treats as not cached.

        Returns:
            True if the build output was stored
        """
        target = self.index.entry_path(self.config.toolchain_key, library)
        self.filesystem.make_dirs(target.parent)
        self.filesystem.remove(target)

        try:
            self.filesystem.move(self.config.build_output_dir, target)
        except FilesystemError as e:
            logger.error(f"Error storing {library} in cache: {e}")
            self.filesystem.make_dirs(target)
            return False

        logger.debug(f"Stored {library} at {target}")
        return True

    def build_and_store(
        self, libraries: Iterable[LibraryIdentity]
    ) -> List[LibraryIdentity]:
        """
        Build each library in turn and store successful builds in the cache.

        Returns:
            Libraries that were built and stored
        """
        stored = []
        for library in libraries:
            if self.build(library) and self.store(library):
                stored.append(library)
        return stored

    def restore_to_project(
        self, libraries: Iterable[LibraryIdentity]
    ) -> List[LibraryIdentity]:
        """
        Replace the project's build output with cached frameworks.

        The build output directory is emptied first, then every library's
        cache entry is merged into it in (display_key, version) order.

        Returns:
            Libraries that were copied
        """
        destination = self.config.build_output_dir
        self.filesystem.remove(destination)
        if not self.filesystem.make_dirs(destination):
            logger.error(f"Cannot create build output directory {destination}")
            return []

        restored = []
        seen = set()
        for library in sorted(libraries, key=lambda lib: lib.cache_key):
            if library.cache_key in seen:
                continue
            seen.add(library.cache_key)

            source = self.index.entry_path(self.config.toolchain_key, library)
            if not self.filesystem.contains_files(source):
                logger.warning(f"{library} is not in the cache, skipping")
                continue

            logger.info(f"Copying library {library.name} from cache")
            try:
                self.filesystem.copy_tree(source, destination)
            except FilesystemError as e:
                logger.error(f"Error copying {library} from cache: {e}")
                continue
            restored.append(library)

        return restored
