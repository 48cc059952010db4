"""Key-value stores backing the repositories."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class FileStore:
    """
    Store keeping one file per key under a data directory.

    Writes go to a temporary file in the same directory which is then
    renamed over the target, so a reader sees either the old or the new
    document.
    """

    SUFFIX = ".yaml"

    def __init__(self, root: Path) -> None:
        """
        Initialize store.

        Args:
            root: Path to the data directory (e.g., .taskpulse/)
        """
        self.root = root

    def ensure_directory(self) -> None:
        """Create the data directory if it doesn't exist."""
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        """Get the file backing a key."""
        return self.root / f"{key}{self.SUFFIX}"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.ensure_directory()
        path = self.path_for(key)

        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("Wrote %s (%d bytes)", path, len(value))

    def delete(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)


class MemoryStore:
    """Store keeping values in a dict. Nothing survives the process."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)
