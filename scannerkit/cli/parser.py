"""
scannerkit CLI argument parser.

This module implements the command-line interface using argparse.
"""

import argparse
import importlib
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import List, Optional

from scannerkit.core.platform import PlatformFamily

# Get version from package
try:
    __version__ = version("scannerkit")
except PackageNotFoundError:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """scannerkit command-line interface."""

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
            prog="setup-sonar-scanner",
            description="Install the Sonar Scanner CLI on a CI runner",
            epilog='Use "setup-sonar-scanner COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"scannerkit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./scannerkit.yaml)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_install_command(subparsers)
        self._add_locate_command(subparsers)

        return parser

    def _add_request_arguments(self, parser):
        """Add the arguments describing what to install."""
        parser.add_argument(
            "--scanner-version",
            metavar="VERSION",
            help="Sonar Scanner CLI version (e.g., 4.8.0.2856)",
        )
        jre_group = parser.add_mutually_exclusive_group()
        jre_group.add_argument(
            "--with-jre",
            dest="with_jre",
            action="store_const",
            const=True,
            default=None,
            help="Install the variant bundling a Java runtime",
        )
        jre_group.add_argument(
            "--without-jre",
            dest="with_jre",
            action="store_const",
            const=False,
            help="Install the variant without a Java runtime",
        )

    def _add_install_command(self, subparsers):
        """Add 'install' subcommand."""
        parser = subparsers.add_parser(
            "install",
            help="Download and install the Sonar Scanner CLI",
            description=(
                "Download the Sonar Scanner CLI and install it into the "
                "platform's fixed directory, replacing any prior installation"
            ),
        )
        self._add_request_arguments(parser)
        parser.add_argument(
            "--no-add-path",
            dest="add_path",
            action="store_false",
            help="Do not add the scanner's bin directory to GITHUB_PATH",
        )

    def _add_locate_command(self, subparsers):
        """Add 'locate' subcommand."""
        parser = subparsers.add_parser(
            "locate",
            help="Show download URL and install directory",
            description="Print where the scanner would be downloaded from and installed to",
        )
        self._add_request_arguments(parser)
        parser.add_argument(
            "--platform",
            metavar="NAME",
            help=(
                "Platform to resolve for "
                f"({', '.join(f.value for f in PlatformFamily)}; default: current host)"
            ),
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
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

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
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
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
        command_map = {
            "install": "scannerkit.cli.commands.install",
            "locate": "scannerkit.cli.commands.locate",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
