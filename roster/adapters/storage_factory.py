"""
Storage backend selection from config.
"""

from __future__ import annotations

from pathlib import Path

from roster.adapters.local_storage import FileKeyValueStore
from roster.adapters.memory_storage import InMemoryKeyValueStore
from roster.adapters.sqlite_storage import SQLiteKeyValueStore
from roster.components.students.ports import KeyValueStoragePort
from roster.config.models import StorageConfig

SQLITE_FILENAME = "roster.db"


def create_storage(config: StorageConfig) -> KeyValueStoragePort:
    """Build the key-value backend named by config.backend."""
    if config.backend == "memory":
        return InMemoryKeyValueStore()
    if config.backend == "sqlite":
        return SQLiteKeyValueStore(Path(config.path) / SQLITE_FILENAME)
    return FileKeyValueStore(config.path)
