"""
Installation records as reported by Visual Studio discovery.

Discovery itself (vswhere, the setup configuration COM API) happens outside
this package. This module only decodes its JSON output into RawInstallation
values. Two shapes are accepted:

- compact: ``{"path": ..., "version": ..., "packages": ["id", ...]}``
- vswhere: ``{"installationPath": ..., "installationVersion": ...,
  "packages": [{"id": ...}, ...]}``
"""

import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Tuple

from vsfinder.core.exceptions import InstallationRecordsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawInstallation:
    """
    One installation as reported by discovery.

    Attributes:
        path: Installation root, possibly relative or unnormalized
        version: Free-form version string
        packages: Installed package/component identifiers
    """

    path: str
    version: str
    packages: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of ids but store an immutable tuple.
        object.__setattr__(self, "packages", tuple(self.packages))


def load_installations(text: str, source: str = "") -> List[RawInstallation]:
    """
    Decode installation records from JSON text.

    Args:
        text: JSON document holding a list of installation objects
        source: Where the text came from, for error messages

    Returns:
        Installations in the order they were reported

    Raises:
        InstallationRecordsError: If the text is not a JSON list
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug(f"records = {text[:200]!r}")
        raise InstallationRecordsError(f"Invalid JSON: {e}", source)

    if not isinstance(data, list):
        raise InstallationRecordsError("Expected a JSON list of installations", source)

    installations = []
    for index, entry in enumerate(data):
        installation = _parse_entry(entry)
        if installation is None:
            logger.debug(f"Skipping malformed installation record #{index}: {entry!r}")
            continue
        installations.append(installation)

    logger.debug(f"Loaded {len(installations)} installation record(s)")
    return installations


def read_installations(source: str) -> List[RawInstallation]:
    """
    Read installation records from a file, or from stdin when source is "-".

    Raises:
        InstallationRecordsError: If the source cannot be read or decoded
    """
    if source == "-":
        return load_installations(sys.stdin.read(), "<stdin>")

    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise InstallationRecordsError(f"Cannot read records: {e}", str(path))

    return load_installations(text, str(path))


def _parse_entry(entry: Any) -> Optional[RawInstallation]:
    if not isinstance(entry, dict):
        return None

    path = entry.get("path", entry.get("installationPath"))
    version = entry.get("version", entry.get("installationVersion"))
    if not isinstance(path, str) or not isinstance(version, str):
        return None

    packages = []
    for package in entry.get("packages") or []:
        if isinstance(package, str):
            packages.append(package)
        elif isinstance(package, dict) and isinstance(package.get("id"), str):
            packages.append(package["id"])

    return RawInstallation(path=path, version=version, packages=tuple(packages))
