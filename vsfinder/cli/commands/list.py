"""
List command implementation.

Shows every reported installation with the capabilities found for it.
"""

import json
import logging

from vsfinder.cli.utils import (
    load_finder_config,
    load_records,
    resolve_records_source,
    safe_print,
)
from vsfinder.finder.annotator import annotate_installation
from vsfinder.finder.diagnostics import DiagnosticLog

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = load_finder_config(args)
    log = DiagnosticLog()

    installations = load_records(resolve_records_source(args, config), log)
    candidates = [annotate_installation(inst, log=log) for inst in installations]

    if args.json:
        safe_print(json.dumps([c.to_dict() for c in candidates], indent=2))
        return 0

    if not candidates:
        safe_print("No Visual Studio installations reported")
        return 0

    for candidate in candidates:
        status = "usable" if candidate.qualified else "not usable"
        year = f"VS{candidate.year}" if candidate.year else "unknown version"
        safe_print(f"{year} ({candidate.version}) [{status}]")
        safe_print(f"  Path:        {candidate.path}")
        safe_print(f"  MSBuild:     {candidate.msbuild or 'missing'}")
        safe_print(f"  Toolset:     {candidate.toolset or 'missing'}")
        safe_print(f"  Windows SDK: {candidate.sdk or 'missing'}")

    return 0
