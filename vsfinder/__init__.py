"""
vsfinder - pick a usable Visual Studio installation for native builds.
"""

from vsfinder.finder import (
    Candidate,
    DiagnosticLog,
    EnvironmentConstraint,
    RawInstallation,
    SelectionResult,
    VersionRequest,
    select_installation,
)

__all__ = [
    "Candidate",
    "DiagnosticLog",
    "EnvironmentConstraint",
    "RawInstallation",
    "SelectionResult",
    "VersionRequest",
    "select_installation",
]
