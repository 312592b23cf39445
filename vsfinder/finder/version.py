"""
Visual Studio version normalization.

Installation versions look like "16.11.34031.81". Only the major number
matters for selection: it identifies the product generation (release year).
"""

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from .diagnostics import DiagnosticLog

logger = logging.getLogger(__name__)

# Extend when a new Visual Studio generation ships.
VERSION_YEARS = MappingProxyType(
    {
        15: 2017,
        16: 2019,
        17: 2022,
    }
)

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\..*")


@dataclass(frozen=True)
class NormalizedVersion:
    """
    Structured form of an installation version string.

    Attributes:
        major: Major version number, None if the string did not parse
        minor: Minor version number, None if the string did not parse
        year: Release year, None if unparseable or unsupported
    """

    major: Optional[int] = None
    minor: Optional[int] = None
    year: Optional[int] = None


def normalize_version(
    version: str, log: Optional[DiagnosticLog] = None
) -> NormalizedVersion:
    """
    Parse an installation version string.

    Args:
        version: Free-form version string (e.g., "17.4.33213.308")
        log: Diagnostic log receiving parse failures

    Returns:
        NormalizedVersion; year is None when the version cannot be used
    """
    match = _VERSION_RE.match(version or "")
    if not match:
        _note(log, f"failed to parse version: {version}")
        return NormalizedVersion()

    major = int(match.group(1), 10)
    minor = int(match.group(2), 10)
    logger.debug(f"- version match = {match.groups()}")

    year = VERSION_YEARS.get(major)
    if year is None:
        _note(log, f"unsupported version: {major}")

    return NormalizedVersion(major=major, minor=minor, year=year)


def _note(log: Optional[DiagnosticLog], message: str) -> None:
    if log is not None:
        log.add(f"- {message}")
    else:
        logger.debug(f"- {message}")
