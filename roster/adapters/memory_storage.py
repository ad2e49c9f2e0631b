"""
In-memory key-value storage adapter.

Dict-backed stand-in for browser localStorage. An optional quota models the
"quota exceeded" failure of a real browser store.
"""

from __future__ import annotations

from roster.components.students.ports import StorageUnavailable


class InMemoryKeyValueStore:
    """In-memory implementation of KeyValueStoragePort."""

    def __init__(self, *, quota_bytes: int | None = None, enabled: bool = True) -> None:
        """
        Initialize store.

        Args:
            quota_bytes: Maximum total size of keys and values (UTF-8), or None
            enabled: When False every call raises StorageUnavailable
        """
        self._items: dict[str, str] = {}
        self.quota_bytes = quota_bytes
        self.enabled = enabled

    def _check_enabled(self) -> None:
        if not self.enabled:
            raise StorageUnavailable("storage is disabled")

    def _size_with(self, key: str, value: str) -> int:
        items = {**self._items, key: value}
        return sum(len(k.encode()) + len(v.encode()) for k, v in items.items())

    def get_item(self, key: str) -> str | None:
        self._check_enabled()
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._check_enabled()
        if self.quota_bytes is not None and self._size_with(key, value) > self.quota_bytes:
            raise StorageUnavailable(f"quota of {self.quota_bytes} bytes exceeded")
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._check_enabled()
        self._items.pop(key, None)
