"""
KeyValueStore - Durable JSON key-value storage in a single SQLite file.

Every store in the classroom package persists through this class:
- progress_data / progress_xp (ProgressStore)
- admin_flag (AuthStore)
- question_bank (QuestionBank)

Each call opens and closes its own connection, so a write is committed
before the call returns. The file and table are created on first access;
if that fails, every call raises StorageUnavailable and the stores fall
back to their in-memory state.
"""

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any

from lingualeap.errors import CorruptPersistedState, StorageUnavailable


logger = logging.getLogger(__name__)


class KeyValueStore:
    """
    String keys mapped to JSON-encoded values.

    sqlite3.Error is re-raised as StorageUnavailable and undecodable values
    as CorruptPersistedState; callers decide how to recover.
    """

    def __init__(self, db_path: str | Path):
        """
        Initialize storage.

        Args:
            db_path: Path to the SQLite file (created on first use)
        """
        self.db_path = Path(db_path)
        self._ready = False

    def _ensure_database(self):
        """Create database and table if they don't exist."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self.db_path))
        except (OSError, sqlite3.Error) as e:
            raise StorageUnavailable(f"Cannot open storage at {self.db_path}: {e}") from e

        try:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
                );
            """)
            conn.commit()
        except sqlite3.Error as e:
            raise StorageUnavailable(f"Cannot initialize storage at {self.db_path}: {e}") from e
        finally:
            conn.close()
        logger.debug(f"Storage ready at {self.db_path}")
        self._ready = True

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection, creating the table on first use."""
        if not self._ready:
            self._ensure_database()
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    # -------------------------------------------------------------------------
    # Raw access
    # -------------------------------------------------------------------------

    def get_raw(self, key: str) -> str | None:
        """Get the stored text for a key, or None if absent."""
        try:
            conn = self._get_connection()
            try:
                cursor = conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                )
                row = cursor.fetchone()
                return row["value"] if row else None
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageUnavailable(f"Cannot read '{key}': {e}") from e

    def set_raw(self, key: str, value: str):
        """Store text under a key, replacing any previous value."""
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
            raise StorageUnavailable(f"Cannot write '{key}': {e}") from e

    # -------------------------------------------------------------------------
    # JSON access
    # -------------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get the decoded value for a key.

        Args:
            key: Storage key
            default: Returned when the key is absent

        Raises:
            StorageUnavailable: storage could not be read
            CorruptPersistedState: stored text is not valid JSON
        """
        raw = self.get_raw(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptPersistedState(key, str(e)) from e

    def set(self, key: str, value: Any):
        """Encode a value as JSON and store it."""
        self.set_raw(key, json.dumps(value, ensure_ascii=False))

    def set_many(self, items: dict[str, Any]):
        """Store several values in one transaction."""
        rows = [(key, json.dumps(value, ensure_ascii=False)) for key, value in items.items()]
        try:
            conn = self._get_connection()
            try:
                conn.executemany(
                    """INSERT INTO kv_store (key, value, updated_at)
                       VALUES (?, ?, CURRENT_TIMESTAMP)
                       ON CONFLICT(key) DO UPDATE SET
                         value = excluded.value,
                         updated_at = excluded.updated_at""",
                    rows
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageUnavailable(f"Cannot write {sorted(items)}: {e}") from e

    def remove(self, *keys: str):
        """Delete keys. Missing keys are ignored."""
        try:
            conn = self._get_connection()
            try:
                conn.executemany(
                    "DELETE FROM kv_store WHERE key = ?",
                    [(key,) for key in keys]
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageUnavailable(f"Cannot remove {list(keys)}: {e}") from e

