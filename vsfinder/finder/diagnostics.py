"""
Diagnostic trail for a single selection run.

Every reason for accepting or rejecting an installation is logged and also
kept, in order, so it can be shown to the user at error level when no usable
installation is found.
"""

import logging
from typing import Iterator, List

logger = logging.getLogger(__name__)


class DiagnosticLog:
    """Append-only, ordered list of human-readable messages."""

    def __init__(self):
        self._entries: List[str] = []

    def add(self, message: str) -> None:
        """Record a message and emit it at INFO level."""
        logger.info(message)
        self._entries.append(message)

    @property
    def entries(self) -> List[str]:
        """Copy of the recorded messages, oldest first."""
        return list(self._entries)

    def contains(self, text: str) -> bool:
        """Check whether any recorded message contains text."""
        return any(text in entry for entry in self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        return "\n".join(self._entries)
