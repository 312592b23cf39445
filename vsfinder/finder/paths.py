"""
Windows path helpers.

Installation paths are always Windows paths, whatever platform vsfinder
itself runs on, so everything here goes through ntpath.
"""

import ntpath


def resolve_path(path: str) -> str:
    """Return path as an absolute, normalized Windows path."""
    return ntpath.normpath(ntpath.abspath(path))


def same_location(first: str, second: str) -> bool:
    """Check whether two Windows paths name the same location."""
    return ntpath.normcase(resolve_path(first)) == ntpath.normcase(
        resolve_path(second)
    )
