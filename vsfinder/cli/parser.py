"""
vsfinder CLI argument parser.

This module implements the command-line interface for vsfinder using argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from vsfinder.core.exceptions import VSFinderError

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("vsfinder")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """vsfinder command-line interface."""

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
            prog="vsfinder",
            description="vsfinder - find a usable Visual Studio installation",
            epilog='Use "vsfinder COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"vsfinder {__version__}"
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
            help="Path to configuration file (default: ./vsfinder.yaml)",
        )
        parser.add_argument(
            "--project-root",
            type=Path,
            metavar="PATH",
            default=Path.cwd(),
            help="Project root directory (default: current directory)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_select_command(subparsers)
        self._add_list_command(subparsers)

        return parser

    def _add_records_arguments(self, parser):
        parser.add_argument(
            "--records",
            metavar="PATH",
            help='Installation records JSON (vswhere -format json), "-" for stdin',
        )
        parser.add_argument(
            "--json", action="store_true", help="Print machine-readable JSON"
        )

    def _add_select_command(self, subparsers):
        """Add 'select' subcommand."""
        parser = subparsers.add_parser(
            "select",
            help="Select the installation to build with",
            description="Select the newest Visual Studio with MSBuild, "
            "a VC++ toolset and a Windows SDK",
        )
        self._add_records_arguments(parser)
        parser.add_argument(
            "--msvs-version",
            metavar="VERSION",
            help="Only use this release year (2017, 2019, 2022) or installation path",
        )
        parser.add_argument(
            "--ignore-environment",
            action="store_true",
            help="Do not restrict selection to the VS Command Prompt installation",
        )

    def _add_list_command(self, subparsers):
        """Add 'list' subcommand."""
        parser = subparsers.add_parser(
            "list",
            help="List reported installations",
            description="List every reported installation and its components",
        )
        self._add_records_arguments(parser)

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
        except VSFinderError as e:
            logger.error(f"Error: {e}")
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
            "select": "vsfinder.cli.commands.select",
            "list": "vsfinder.cli.commands.list",
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
