"""
Build command implementation.

Restores every dependency in Cartfile.resolved into Carthage/Build from the
cache, building and caching the ones that are missing first.
"""

import logging
from pathlib import Path

from carthagecache.config.settings import resolve_configuration
from carthagecache.core.directory import normalize_project_path
from carthagecache.core.exceptions import CacheDirectoryError, ConfigurationError
from carthagecache.sync.runner import SyncRunner

logger = logging.getLogger(__name__)


def _overrides(args) -> dict:
    """Map parsed flags to configuration overrides; None means not given."""
    return {
        "xcode_version": args.xcode_version,
        "swift_version": args.swift_version,
        "shell": args.shell,
        "platform": args.platform,
        "force": True if args.force else None,
        "use_ssh": False if args.no_ssh else None,
        "verbose": True if args.verbose else None,
        "cache_root": args.cache_root,
    }


def run(args) -> int:
    """
    Run the build command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if the run could not start)
    """
    project_path = normalize_project_path(args.project) if args.project else Path.cwd()
    logger.debug(f"Project path: {project_path}")

    try:
        config = resolve_configuration(project_path, _overrides(args), args.config)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    try:
        report = SyncRunner(config).run()
    except CacheDirectoryError as e:
        logger.error(str(e))
        return 1

    logger.debug(
        f"Built {len(report.stored)} of {len(report.to_build)}, "
        f"restored {len(report.restored)} of {len(report.required)}"
    )
    return 0
