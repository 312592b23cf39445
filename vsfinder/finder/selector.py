"""
Selection of the Visual Studio installation to build with.

select_installation() annotates every reported installation, drops the ones
with an unknown version, prefers newer releases, and returns the first one
that has MSBuild, a VC++ toolset and a Windows SDK and satisfies the active
constraints. Nothing here raises for bad data: every rejection is recorded
in the diagnostic log instead.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from vsfinder.core.interfaces import FileSystemProbe

from .annotator import Candidate, annotate_installation
from .constraints import EnvironmentConstraint, VersionRequest
from .diagnostics import DiagnosticLog
from .records import RawInstallation

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "could not find a usable installation of version 2017 or newer"


@dataclass
class SelectionResult:
    """
    Outcome of one selection run.

    Attributes:
        candidate: Selected installation, or None if nothing qualified
        log: Diagnostic messages recorded during the run
        valid_versions: (year, path) of every installation that had all
            required components, whether or not a constraint rejected it
    """

    candidate: Optional[Candidate]
    log: DiagnosticLog
    valid_versions: List[Tuple[int, str]] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.candidate is not None


def usable_candidates(
    candidates: Iterable[Candidate], log: DiagnosticLog
) -> List[Candidate]:
    """
    Drop candidates with an unknown version and order the rest newest first.

    The sort is stable, so installations of the same year keep their
    reported order.
    """
    known = []
    for candidate in candidates:
        if candidate.year is None:
            log.add(
                f'unknown version "{candidate.version}" found at "{candidate.path}"'
            )
            continue
        known.append(candidate)

    return sorted(known, key=lambda candidate: candidate.year, reverse=True)


def check_capabilities(candidate: Candidate, log: DiagnosticLog) -> bool:
    """Check that a candidate has MSBuild, a toolset and an SDK."""
    if candidate.msbuild:
        log.add('- found "Visual Studio C++ core features"')
    else:
        log.add('- "Visual Studio C++ core features" missing')
        return False

    if candidate.toolset:
        log.add(f"- found VC++ toolset: {candidate.toolset}")
    else:
        log.add("- missing any VC++ toolset")
        return False

    if candidate.sdk:
        log.add(f"- found Windows SDK: {candidate.sdk}")
    else:
        log.add("- missing any Windows SDK")
        return False

    return True


def check_constraints(
    candidate: Candidate,
    log: DiagnosticLog,
    constraint: Optional[EnvironmentConstraint] = None,
    request: Optional[VersionRequest] = None,
) -> bool:
    """Check a qualified candidate against the requested version and prompt."""
    if request is not None and not request.matches_year(candidate.year):
        log.add("- msvs_version does not match this version")
        return False

    if request is not None and not request.matches_path(candidate.path):
        log.add("- msvs_version does not point to this installation")
        return False

    if constraint is not None and not constraint.matches(candidate.path):
        log.add("- does not match this Visual Studio Command Prompt")
        return False

    return True


def select_installation(
    installations: Iterable[RawInstallation],
    constraint: Optional[EnvironmentConstraint] = None,
    request: Optional[VersionRequest] = None,
    fs: Optional[FileSystemProbe] = None,
    log: Optional[DiagnosticLog] = None,
) -> SelectionResult:
    """
    Pick the installation to build with.

    Args:
        installations: Records reported by discovery, in reported order
        constraint: Command prompt pin, if running inside one
        request: User's msvs_version request, if any
        fs: Filesystem probe used to look for MSBuild
        log: Diagnostic log to append to (a new one is created if None)

    Returns:
        SelectionResult with the chosen candidate or None
    """
    log = log if log is not None else DiagnosticLog()
    valid_versions: List[Tuple[int, str]] = []

    candidates = [
        annotate_installation(installation, fs, log) for installation in installations
    ]
    logger.debug(f"candidates: {candidates}")

    for candidate in usable_candidates(candidates, log):
        log.add(
            f"checking VS{candidate.year} ({candidate.version}) found at:\n"
            f'"{candidate.path}"'
        )

        if not check_capabilities(candidate, log):
            continue

        valid_versions.append((candidate.year, candidate.path))

        if not check_constraints(candidate, log, constraint, request):
            continue

        return SelectionResult(
            candidate=candidate, log=log, valid_versions=valid_versions
        )

    log.add(NOT_FOUND_MESSAGE)
    return SelectionResult(candidate=None, log=log, valid_versions=valid_versions)
