"""
Core functionality for vsfinder.

This package contains the foundational modules that other components depend on.
"""

from .exceptions import (
    VSFinderError,
    InstallationRecordsError,
    InvalidVersionRequestError,
    ConfigError,
)

from .interfaces import (
    FileSystemProbe,
    LocalFileSystem,
)

__all__ = [
    # Exceptions
    "VSFinderError",
    "InstallationRecordsError",
    "InvalidVersionRequestError",
    "ConfigError",
    # Interfaces
    "FileSystemProbe",
    "LocalFileSystem",
]
