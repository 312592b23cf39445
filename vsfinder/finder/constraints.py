"""
Constraints that restrict which qualified installation may be selected.

Two sources exist: the Visual Studio Command Prompt (VCINSTALLDIR points
inside one specific installation) and an explicit msvs_version request
from the user, given either as a release year or as an installation path.
"""

import logging
import ntpath
import os
from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple

from vsfinder.core.exceptions import InvalidVersionRequestError

from .diagnostics import DiagnosticLog
from .paths import resolve_path, same_location
from .version import VERSION_YEARS

logger = logging.getLogger(__name__)

VCINSTALLDIR = "VCINSTALLDIR"


@dataclass(frozen=True)
class EnvironmentConstraint:
    """Pin selection to the installation of the active command prompt."""

    path: str

    def matches(self, path: str) -> bool:
        return same_location(self.path, path)


@dataclass(frozen=True)
class VersionRequest:
    """
    A user request for a particular Visual Studio.

    Exactly one of year or path is set.
    """

    year: Optional[int] = None
    path: Optional[str] = None

    @classmethod
    def parse(cls, value: str) -> "VersionRequest":
        """
        Parse an msvs_version value.

        Args:
            value: Release year ("2019") or installation path

        Returns:
            VersionRequest for the value

        Raises:
            InvalidVersionRequestError: If value is neither
        """
        value = (value or "").strip()
        if value.isascii() and value.isdecimal():
            year = int(value)
            if year not in VERSION_YEARS.values():
                raise InvalidVersionRequestError(value)
            return cls(year=year)

        if "\\" in value or "/" in value:
            return cls(path=resolve_path(value))

        raise InvalidVersionRequestError(value)

    def matches_year(self, year: int) -> bool:
        return self.year is None or self.year == year

    def matches_path(self, path: str) -> bool:
        return self.path is None or same_location(self.path, path)

    def __str__(self) -> str:
        return str(self.year) if self.year is not None else str(self.path)


def constraint_from_environment(
    environ: Optional[Mapping[str, str]] = None,
    log: Optional[DiagnosticLog] = None,
) -> Optional[EnvironmentConstraint]:
    """
    Build the command prompt constraint from the environment.

    Inside a Visual Studio Command Prompt VCINSTALLDIR is "<install>\\VC\\",
    so the installation root is its parent.

    Args:
        environ: Environment mapping (defaults to os.environ)
        log: Diagnostic log receiving the outcome

    Returns:
        EnvironmentConstraint, or None outside a command prompt
    """
    environ = os.environ if environ is None else environ
    log = log if log is not None else DiagnosticLog()

    vc_install_dir = environ.get(VCINSTALLDIR)
    if not vc_install_dir:
        log.add("VCINSTALLDIR not set, not running in VS Command Prompt")
        return None

    path = resolve_path(ntpath.join(vc_install_dir, ".."))
    log.add(
        "running in VS Command Prompt, installation path is:\n"
        f'"{path}"\n- will only use this version'
    )
    return EnvironmentConstraint(path=path)


def describe_valid_versions(valid_versions: List[Tuple[int, str]]) -> str:
    """Format the qualified installations seen during a selection run."""
    return ", ".join(f'{year} ("{path}")' for year, path in valid_versions)
