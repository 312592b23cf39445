"""
Annotation of raw installation records into selection candidates.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from vsfinder.core.interfaces import FileSystemProbe

from .capabilities import probe_msbuild, probe_sdk, probe_toolset
from .diagnostics import DiagnosticLog
from .paths import resolve_path
from .records import RawInstallation
from .version import normalize_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    """
    An installation annotated with everything selection needs.

    Attributes:
        path: Resolved installation root
        version: Version string as reported
        major: Parsed major version (None if unparseable)
        minor: Parsed minor version (None if unparseable)
        year: Release year (None if unparseable or unsupported)
        msbuild: Path to MSBuild.exe, if available
        toolset: VC++ platform toolset, if installed
        sdk: Windows SDK version, if installed
    """

    path: str
    version: str
    major: Optional[int] = None
    minor: Optional[int] = None
    year: Optional[int] = None
    msbuild: Optional[str] = None
    toolset: Optional[str] = None
    sdk: Optional[str] = None

    @property
    def qualified(self) -> bool:
        """True when the candidate can be used for a build."""
        return all(
            value is not None
            for value in (self.year, self.msbuild, self.toolset, self.sdk)
        )

    def __str__(self) -> str:
        return f"VS{self.year} ({self.version}) at {self.path}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "path": self.path,
            "version": self.version,
            "version_major": self.major,
            "version_minor": self.minor,
            "version_year": self.year,
            "msbuild": self.msbuild,
            "toolset": self.toolset,
            "sdk": self.sdk,
            "qualified": self.qualified,
        }


def annotate_installation(
    installation: RawInstallation,
    fs: Optional[FileSystemProbe] = None,
    log: Optional[DiagnosticLog] = None,
) -> Candidate:
    """
    Turn one raw installation record into a Candidate.

    Capabilities are probed even when the version is unusable so the
    candidate is complete for listing.

    Args:
        installation: Record reported by discovery
        fs: Filesystem probe used to look for MSBuild
        log: Diagnostic log receiving version problems

    Returns:
        The annotated candidate
    """
    path = resolve_path(installation.path)
    logger.debug(f'processing installation: "{path}"')

    version = normalize_version(installation.version, log)
    packages = installation.packages

    return Candidate(
        path=path,
        version=installation.version,
        major=version.major,
        minor=version.minor,
        year=version.year,
        msbuild=probe_msbuild(path, packages, version.year, fs),
        toolset=probe_toolset(packages, version.year),
        sdk=probe_sdk(packages),
    )
