"""
Append-only transaction log.

One human-readable sentence per line. The file is opened and closed on every
write, and write failures are reported through ``logging`` instead of being
raised into the calling operation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = "resource_log.txt"


class TransactionLog:
    """Best-effort text sink for state-changing registry operations."""

    def __init__(self, path: Union[str, Path] = DEFAULT_LOG_PATH, *, enabled: bool = True):
        self.path = Path(path).expanduser()
        self.enabled = enabled

    def write(self, message: str) -> bool:
        """Append ``message`` as one line. Returns ``False`` if nothing was written."""
        if not self.enabled:
            return False
        try:
            with self.path.open("a", encoding="utf-8", errors="backslashreplace") as fh:
                fh.write(message + "\n")
        except (OSError, ValueError):
            logger.exception("Failed to append to transaction log %s", self.path)
            return False
        return True

    def read_lines(self) -> List[str]:
        """Return the logged lines, oldest first."""
        if not self.path.exists():
            return []
        return self.path.read_text(encoding="utf-8").splitlines()

    def __repr__(self) -> str:
        return f"TransactionLog(path={str(self.path)!r}, enabled={self.enabled})"
