"""
Visual Studio installation selection.

Public API:
    select_installation: Pick the installation to build with
    annotate_installation: Annotate one installation record
    normalize_version: Parse an installation version string
"""

from .annotator import Candidate, annotate_installation
from .capabilities import probe_msbuild, probe_sdk, probe_toolset
from .constraints import (
    EnvironmentConstraint,
    VersionRequest,
    constraint_from_environment,
    describe_valid_versions,
)
from .diagnostics import DiagnosticLog
from .records import RawInstallation, load_installations, read_installations
from .selector import SelectionResult, select_installation
from .version import NormalizedVersion, normalize_version

__all__ = [
    "Candidate",
    "annotate_installation",
    "probe_msbuild",
    "probe_sdk",
    "probe_toolset",
    "EnvironmentConstraint",
    "VersionRequest",
    "constraint_from_environment",
    "describe_valid_versions",
    "DiagnosticLog",
    "RawInstallation",
    "load_installations",
    "read_installations",
    "SelectionResult",
    "select_installation",
    "NormalizedVersion",
    "normalize_version",
]
