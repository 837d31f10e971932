"""
Key-value backends for the persisted document.

The document lives under one key, the way a browser keeps it in local
storage. Two backends are provided:
- SqliteBackend: durable, file-backed (~/.designdesk/storage.db)
- MemoryBackend: process-local dict, for tests and throwaway sessions
"""

import sqlite3
from pathlib import Path
from typing import Optional, Protocol

from designdesk.config import DEFAULT_DATA_DIR
from designdesk.errors import StorageError


DEFAULT_STORAGE_DB = DEFAULT_DATA_DIR / "storage.db"


class KeyValueBackend(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryBackend:
    """In-memory backend. Contents vanish with the process."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def delete(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)


class SqliteBackend:
    """
    Key-value table in a SQLite file.

    Each method opens its own connection, so one backend can be shared by the
    Streamlit script thread and autosave timer threads.
    """

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize backend.

        Args:
            db_path: Path to storage.db (default: ~/.designdesk/storage.db)
        """
        self.db_path = Path(db_path) if db_path else DEFAULT_STORAGE_DB
        self._ensure_database()

    def _ensure_database(self):
        """Create database and table if they don't exist."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self.db_path))
            try:
                conn.executescript("""
                    CREATE TABLE IF NOT EXISTS kv_store (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
                    );
                """)
                conn.commit()
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Cannot open storage at {self.db_path}: {e}") from e

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def get(self, key: str) -> Optional[str]:
        try:
            conn = self._get_connection()
            try:
                row = conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                ).fetchone()
                return row["value"] if row else None
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read '{key}': {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            conn = self._get_connection()
            try:
                conn.execute(
                    """INSERT INTO kv_store (key, value, updated_at)
                       VALUES (?, ?, CURRENT_TIMESTAMP)
                       ON CONFLICT(key) DO UPDATE SET
                         value = excluded.value,
                         updated_at = excluded.updated_at""",
                    (key, value)
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to write '{key}': {e}") from e

    def delete(self, key: str) -> None:
        try:
            conn = self._get_connection()
            try:
                conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to delete '{key}': {e}") from e
