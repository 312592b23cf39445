"""
Select command implementation.

Picks the Visual Studio installation to build with and reports it, or
prints the diagnostic trail when none is usable.
"""

import json
import logging

from vsfinder.cli.utils import (
    format_success_message,
    load_finder_config,
    load_records,
    print_error,
    resolve_records_source,
    safe_print,
)
from vsfinder.finder.constraints import (
    VersionRequest,
    constraint_from_environment,
    describe_valid_versions,
)
from vsfinder.finder.diagnostics import DiagnosticLog
from vsfinder.finder.selector import SelectionResult, select_installation

logger = logging.getLogger(__name__)

INSTALL_HINT = (
    "You need to install the latest version of Visual Studio\n"
    'including the "Desktop development with C++" workload.\n'
    "For more information consult the documentation at:\n"
    "https://learn.microsoft.com/en-us/cpp/build/vscpp-step-0-installation"
)


def run(args) -> int:
    """
    Run the select command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if an installation was selected, 1 otherwise)
    """
    config = load_finder_config(args)

    request = None
    msvs_version = args.msvs_version or config.msvs_version
    if msvs_version:
        request = VersionRequest.parse(msvs_version)

    log = DiagnosticLog()

    constraint = None
    if config.use_environment and not args.ignore_environment:
        constraint = constraint_from_environment(log=log)

    installations = load_records(resolve_records_source(args, config), log)
    result = select_installation(
        installations, constraint=constraint, request=request, log=log
    )

    if args.json:
        safe_print(json.dumps(_to_json(result), indent=2))
        return 0 if result.found else 1

    if not result.found:
        _report_failure(result, request)
        return 1

    candidate = result.candidate
    logger.info(
        f"using VS{candidate.year} ({candidate.version}) found at:\n"
        f'"{candidate.path}"\nrun with --verbose for detailed information'
    )
    safe_print(
        format_success_message(
            f"Visual Studio {candidate.year}",
            {
                "Version": candidate.version,
                "Path": candidate.path,
                "MSBuild": candidate.msbuild,
                "Toolset": candidate.toolset,
                "Windows SDK": candidate.sdk,
            },
        )
    )
    return 0


def _report_failure(result: SelectionResult, request) -> None:
    """Print everything that was tried, at error level."""
    logger.error(f"find VS\n{result.log}")

    if request is not None and result.valid_versions:
        print_error(
            f"msvs_version does not match any of the valid versions: {request}",
            f"valid: {describe_valid_versions(result.valid_versions)}",
        )
    elif request is not None:
        print_error(
            f"msvs_version was set to {request} but no usable installation was found"
        )

    print_error("could not find any Visual Studio installation to use", INSTALL_HINT)


def _to_json(result: SelectionResult) -> dict:
    return {
        "found": result.found,
        "installation": result.candidate.to_dict() if result.found else None,
        "valid_versions": [
            {"year": year, "path": path} for year, path in result.valid_versions
        ],
        "log": result.log.entries,
    }
