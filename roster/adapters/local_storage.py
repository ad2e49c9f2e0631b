"""
Local Filesystem Key-Value Storage Adapter.

Implements KeyValueStoragePort on the local filesystem, one file per key.
Gives the roster a durable localStorage equivalent for CLI and single-server
use.

Directory structure: {base_path}/{key}.json
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from roster.components.students.ports import StorageCorrupt, StorageUnavailable

logger = logging.getLogger(__name__)


class FileKeyValueStore:
    """
    Local filesystem implementation of KeyValueStoragePort.

    Values are written to a temporary sibling file and renamed into place so a
    crash mid-write never leaves a truncated value behind.
    """

    def __init__(self, base_path: str | Path, *, create_dirs: bool = True) -> None:
        """
        Initialize local file storage.

        Args:
            base_path: Root directory for storage
            create_dirs: Whether to create the directory if it doesn't exist
        """
        self.base_path = Path(base_path)

        if create_dirs:
            try:
                self.base_path.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StorageUnavailable(f"cannot create {self.base_path}: {e}") from e

    def _key_to_path(self, key: str) -> Path:
        """Convert storage key to a file path."""
        # Sanitize key to prevent directory traversal
        safe_key = key.replace("..", "").replace("/", "_").replace("\\", "_").lstrip(".")
        if not safe_key:
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.base_path / f"{safe_key}.json"

    def get_item(self, key: str) -> str | None:
        path = self._key_to_path(key)
        if not path.exists():
            return None

        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise StorageCorrupt(key, f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            logger.error("Failed to read %s: %s", path, e)
            raise StorageUnavailable(f"cannot read {path}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self._key_to_path(key)
        tmp_path = path.with_suffix(".json.tmp")

        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error("Failed to write %s: %s", path, e)
            raise StorageUnavailable(f"cannot write {path}: {e}") from e

    def remove_item(self, key: str) -> None:
        path = self._key_to_path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageUnavailable(f"cannot remove {path}: {e}") from e
