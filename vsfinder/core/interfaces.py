"""
Core interfaces for vsfinder.

The selection logic only touches the filesystem to check whether MSBuild
exists at a given location. That check goes through FileSystemProbe so
tests and callers on other platforms can supply their own view of the disk.
"""

import logging
import os
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class FileSystemProbe(ABC):
    """Abstract interface for filesystem existence checks."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Check whether a path exists.

        Args:
            path: Absolute path to check

        Returns:
            True if something exists at path, False otherwise
        """
        pass


class LocalFileSystem(FileSystemProbe):
    """FileSystemProbe backed by the local disk."""

    def exists(self, path: str) -> bool:
        found = os.path.exists(path)
        logger.debug(f"exists({path}) -> {found}")
        return found
