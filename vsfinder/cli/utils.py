"""
Shared utilities for CLI commands.

Provides common functionality used across multiple CLI commands to
eliminate duplication and ensure consistent behavior.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from vsfinder.config.parser import FinderConfig, find_config, parse_config
from vsfinder.core.exceptions import InstallationRecordsError
from vsfinder.finder.diagnostics import DiagnosticLog
from vsfinder.finder.records import RawInstallation, read_installations

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Management
# ============================================================================


def load_finder_config(args) -> FinderConfig:
    """
    Load configuration for a command.

    Uses --config when given, otherwise vsfinder.yaml in the project root.
    Without either, the defaults apply.

    Raises:
        ConfigError: If the configuration file is invalid
    """
    project_root = resolve_project_root(getattr(args, "project_root", None))
    config_file = find_config(project_root, getattr(args, "config", None))
    if config_file is None:
        return FinderConfig()
    return parse_config(config_file)


def resolve_records_source(args, config: FinderConfig) -> Optional[str]:
    """
    Work out where installation records come from.

    --records wins over the configured file. Configured paths are relative
    to the project root.
    """
    if getattr(args, "records", None):
        return args.records

    if config.records:
        project_root = resolve_project_root(getattr(args, "project_root", None))
        return str(project_root / config.records)

    return None


def load_records(source: Optional[str], log: DiagnosticLog) -> List[RawInstallation]:
    """
    Read installation records, treating unreadable input as no installations.

    Args:
        source: Records file, "-" for stdin, or None
        log: Diagnostic log receiving read failures

    Returns:
        Installation records (empty on failure)
    """
    if source is None:
        log.add("no installation records given, use --records or set records in config")
        return []

    try:
        return read_installations(source)
    except InstallationRecordsError as e:
        logger.debug(f"Failed to read installation records: {e}")
        log.add(f"could not read installation records: {e}")
        return []


# ============================================================================
# User Interface / Output Formatting
# ============================================================================


def format_success_message(
    title: str,
    details: Dict[str, Any],
    width: int = 70,
) -> str:
    """
    Format a standardized success message.

    Args:
        title: Success message title
        details: Key-value pairs to display
        width: Width of message box

    Returns:
        Formatted message string
    """
    lines = ["=" * width, title, "=" * width, ""]

    for key, value in details.items():
        lines.append(f"{key}: {value}")

    lines.append("")
    return "\n".join(lines)


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)


def safe_print(message: str, file=None):
    """
    Print message with safe encoding handling for Windows console.

    Falls back to replacing characters the console encoding can't represent.

    Args:
        message: Message to print
        file: Output file (default: stdout)
    """
    try:
        print(message, file=file)
    except UnicodeEncodeError:
        stream = file or sys.stdout
        encoding = getattr(stream, "encoding", None) or "ascii"
        print(message.encode(encoding, "replace").decode(encoding), file=file)


# ============================================================================
# Path Utilities
# ============================================================================


def resolve_project_root(path: Optional[Path] = None) -> Path:
    """
    Resolve project root directory.

    Args:
        path: Optional path (defaults to current directory)

    Returns:
        Resolved absolute path
    """
    if path is None:
        path = Path.cwd()
    return Path(path).resolve()
