"""
One carthage-cache run.

States, in order::

    START -> RESOLVE_MANIFEST -> COMPUTE_REQUIRED_SET -> COMPUTE_CACHED_SET
          -> RECONCILE -> BUILD_MISSING (skipped when nothing is missing)
          -> RESTORE_TO_PROJECT -> DONE

There are no retries. Failures inside a state are logged and the run moves
on; only an unusable cache directory stops it, before the first state.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from carthagecache.cache.index import CacheIndex
from carthagecache.config.settings import Configuration
from carthagecache.core.directory import ensure_cache_partition
from carthagecache.core.filesystem import Filesystem
from carthagecache.core.process import ProcessRunner
from carthagecache.manifest.identity import LibraryIdentity
from carthagecache.manifest.resolver import (
    read_declared_manifest,
    read_resolved_manifest,
)
from carthagecache.sync.executor import SyncExecutor
from carthagecache.sync.reconciler import reconcile

logger = logging.getLogger(__name__)


class RunState(Enum):
    START = "start"
    RESOLVE_MANIFEST = "resolve-manifest"
    COMPUTE_REQUIRED_SET = "compute-required-set"
    COMPUTE_CACHED_SET = "compute-cached-set"
    RECONCILE = "reconcile"
    BUILD_MISSING = "build-missing"
    RESTORE_TO_PROJECT = "restore-to-project"
    DONE = "done"


@dataclass
class RunReport:
    """
    What a run found and did.

    Attributes:
        required: Identities read from Cartfile.resolved
        cached: Identities present in the cache before building
        to_build: Identities queued for building
        stored: Identities built and stored in the cache
        restored: Identities copied into the project
        states: States visited, in order
    """

    required: List[LibraryIdentity] = field(default_factory=list)
    cached: List[LibraryIdentity] = field(default_factory=list)
    to_build: List[LibraryIdentity] = field(default_factory=list)
    stored: List[LibraryIdentity] = field(default_factory=list)
    restored: List[LibraryIdentity] = field(default_factory=list)
    states: List[RunState] = field(default_factory=list)


def prepare_cache(config: Configuration) -> Path:
    """
    Create the cache partition for the configured toolchain key.

    Raises:
        CacheDirectoryError: If the directory cannot be created
    """
    return ensure_cache_partition(config.cache_partition)


class SyncRunner:
    """
    Drives one run from dependency resolution to restored frameworks.

    Example:
        >>> config = resolve_configuration(Path("."))
        >>> report = SyncRunner(config).run()
        >>> print(f"Built {len(report.stored)}, restored {len(report.restored)}")
    """

    def __init__(
        self,
        config: Configuration,
        runner: Optional[ProcessRunner] = None,
        filesystem: Optional[Filesystem] = None,
    ):
        self.config = config
        self.filesystem = filesystem or Filesystem()
        self.executor = SyncExecutor(config, runner, self.filesystem)
        self.index = CacheIndex(config.cache_dir, self.filesystem)
        self.report = RunReport()

    def run(self) -> RunReport:
        """
        Execute the run.

        Returns:
            RunReport describing the run

        Raises:
            CacheDirectoryError: If the cache partition cannot be created
        """
        self.report = RunReport()
        prepare_cache(self.config)
        self._enter(RunState.START)

        self._enter(RunState.RESOLVE_MANIFEST)
        self.executor.ensure_manifest_current()

        self._enter(RunState.COMPUTE_REQUIRED_SET)
        self.report.required = self._required_set()

        self._enter(RunState.COMPUTE_CACHED_SET)
        self.report.cached = self.index.entries(self.config.toolchain_key)

        self._enter(RunState.RECONCILE)
        self.report.to_build = reconcile(
            self.report.required, self.report.cached, force=self.config.force
        )

        if self.report.to_build:
            self._enter(RunState.BUILD_MISSING)
            if self.config.force:
                logger.info("Force building and copying libraries to cache")
            else:
                self._log_other_versions(self.report.to_build)
                logger.info("Building and copying libraries to cache")
            self.report.stored = self.executor.build_and_store(self.report.to_build)
        else:
            logger.info("All dependencies are cached")

        self._enter(RunState.RESTORE_TO_PROJECT)
        logger.info("Copying frameworks from cache to Carthage build")
        self.report.restored = self.executor.restore_to_project(self.report.required)

        self._enter(RunState.DONE)
        logger.info("Done!")
        return self.report

    def _enter(self, state: RunState) -> None:
        logger.debug(f"State: {state.value}")
        self.report.states.append(state)

    def _required_set(self) -> List[LibraryIdentity]:
        resolved = self.config.resolved_manifest
        required = read_resolved_manifest(resolved, self.filesystem)
        if not required:
            logger.warning(f"No dependencies found in {resolved}")

        declared_path = self.config.declared_manifest
        if not self.filesystem.exists(declared_path):
            logger.warning(f"Wrong path to {declared_path.name}: {declared_path}")
            return required

        resolved_keys = {library.display_key for library in required}
        for name in read_declared_manifest(declared_path, self.filesystem):
            if name not in resolved_keys:
                logger.warning(
                    f"{name} is declared in {declared_path.name} "
                    f"but missing from {resolved.name}"
                )
        return required

    def _log_other_versions(self, libraries: List[LibraryIdentity]) -> None:
        key = self.config.toolchain_key
        for library in libraries:
            versions = self.index.versions_for(key, library.display_key)
            if versions:
                logger.info(
                    f"{library.display_key} {library.version} is not cached "
                    f"(cached versions: {', '.join(versions)})"
                )
