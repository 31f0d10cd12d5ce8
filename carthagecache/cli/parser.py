"""
carthage-cache CLI argument parser.

This module implements the command-line interface for carthage-cache using argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("carthage-cache")
except Exception:
    __version__ = "0.1.11"

logger = logging.getLogger(__name__)

COMMANDS = ("build", "help", "version")


class CLI:
    """carthage-cache command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="carthage-cache",
            description="carthage-cache - Cache Carthage framework builds per toolchain",
            epilog='Use "carthage-cache build --help" for build options',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_build_command(subparsers)
        subparsers.add_parser(
            "help",
            help="Display general build commands and options",
        )
        subparsers.add_parser(
            "version",
            help="Display current version",
        )

        return parser

    def _add_build_command(self, subparsers):
        """Add 'build' subcommand."""
        parser = subparsers.add_parser(
            "build",
            help="Copy frameworks from cache, building the ones that aren't cached",
            description=(
                "Resolve Cartfile.resolved, build dependencies missing from the "
                "cache and copy every dependency into Carthage/Build"
            ),
        )
        parser.add_argument(
            "-r",
            "--project",
            metavar="PATH",
            help="Directory containing Cartfile.resolved (default: current directory)",
        )
        parser.add_argument(
            "-x",
            "--xcode-version",
            metavar="VERSION",
            help="Xcode version (default: detected with `llvm-gcc -v`), e.g. 15.0.0",
        )
        parser.add_argument(
            "-l",
            "--swift-version",
            metavar="VERSION",
            help="Swift version (default: detected with `xcrun swift -version`), e.g. 5.9",
        )
        parser.add_argument(
            "-s",
            "--shell",
            metavar="PATH",
            help="Launcher for external commands (default: /usr/bin/env)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Rebuild every dependency and replace its cache entry",
        )
        parser.add_argument(
            "-p",
            "--platform",
            metavar="PLATFORM",
            help="Platform to build (default: iOS). e.g. iOS, Mac, tvOS, watchOS",
        )
        parser.add_argument(
            "-n",
            "--no-ssh",
            action="store_true",
            help="Don't pass --use-ssh when resolving dependencies",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Enable verbose output",
        )
        parser.add_argument(
            "--cache-root",
            type=Path,
            metavar="PATH",
            help="Base cache directory (default: per-user cache directory)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./.carthage-cache.yaml)",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        argv = list(sys.argv[1:] if args is None else args)

        if argv and not argv[0].startswith("-") and argv[0] not in COMMANDS:
            self._configure_logging(argparse.Namespace())
            logger.error(f"Unrecognized command: {' '.join(argv)}")
            logger.info("Use `help` to show available commands.")
            return 1

        try:
            parsed_args = self.parse_args(argv)
        except SystemExit as e:
            # argparse exits 0 after --help and 2 on usage errors
            return 0 if e.code in (0, None) else 1

        # Configure logging
        self._configure_logging(parsed_args)

        # Check if command specified
        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
            if getattr(parsed_args, "verbose", False):
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if getattr(args, "verbose", False):
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif getattr(args, "quiet", False):
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        if args.command == "help":
            self.parser.print_help()
            return 0

        if args.command == "version":
            print(f"Current version: {__version__}")
            return 0

        # Command module mapping
        command_map = {
            "build": "carthagecache.cli.commands.build",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        import importlib

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
