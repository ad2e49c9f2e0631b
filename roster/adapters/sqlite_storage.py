"""
SQLite Key-Value Storage Adapter.

Implements KeyValueStoragePort on a single SQLite table, the way browsers
back localStorage with an on-disk database.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from roster.components.students.ports import StorageUnavailable

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_items (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
)
"""


class SQLiteKeyValueStore:
    def __init__(self, db_path: str | Path) -> None:
        self.db_path = str(db_path)
        try:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailable(f"cannot create {Path(self.db_path).parent}: {e}") from e
        self._execute(SCHEMA)

    def _get_conn(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _execute(self, sql: str, params: tuple[str, ...] = ()) -> list[tuple[str, ...]]:
        try:
            conn = self._get_conn()
        except sqlite3.Error as e:
            raise StorageUnavailable(f"cannot open {self.db_path}: {e}") from e

        try:
            rows = conn.execute(sql, params).fetchall()
            conn.commit()
            return rows
        except sqlite3.Error as e:
            logger.error("SQLite storage error on %s: %s", self.db_path, e)
            raise StorageUnavailable(f"sqlite error: {e}") from e
        finally:
            conn.close()

    def get_item(self, key: str) -> str | None:
        rows = self._execute("SELECT value FROM kv_items WHERE key = ?", (key,))
        return rows[0][0] if rows else None

    def set_item(self, key: str, value: str) -> None:
        self._execute(
            """
            INSERT INTO kv_items (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value=excluded.value
            """,
            (key, value),
        )

    def remove_item(self, key: str) -> None:
        self._execute("DELETE FROM kv_items WHERE key = ?", (key,))
