"""
Students component - Port interfaces.

The roster is persisted through a localStorage-style key-value port: string
keys, string values, synchronous calls.
"""

from __future__ import annotations

from typing import Protocol


class KeyValueStoragePort(Protocol):
    """
    Key-value storage port.

    Implementations raise StorageUnavailable when the backend cannot be read
    or written (disabled, quota exceeded, I/O failure).
    """

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove key if present."""
        ...


class ClockPort(Protocol):
    """Port for time operations."""

    def now_millis(self) -> int:
        """Milliseconds since the Unix epoch."""
        ...


# --- Errors ---


class StorageError(Exception):
    """Base class for storage errors."""


class StorageUnavailable(StorageError):
    """Storage could not be read or written."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Storage unavailable: {detail}")


class StorageCorrupt(StorageError):
    """Stored roster value could not be decoded."""

    def __init__(self, key: str, detail: str) -> None:
        self.key = key
        self.detail = detail
        super().__init__(f"Stored data under '{key}' is corrupt: {detail}")
