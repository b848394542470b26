# ABOUTME: Site configuration variables stored in the catalog database.
# ABOUTME: SqliteConfigStore is the ConfigStore the schema wrappers read settings from.

import sqlite3


class SqliteConfigStore:
    """Key/value settings backed by the `settings` table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def get(self, key: str) -> str | None:
        """Return the value for key, or None if it is not set."""
        cursor = self._conn.execute("SELECT value FROM settings WHERE key = ?", (key,))
        row = cursor.fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        """Set key to value, replacing any previous value."""
        self._conn.execute(
            "INSERT INTO settings (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            (key, value),
        )
        self._conn.commit()

    def delete(self, key: str) -> None:
        """Remove key. Deleting a missing key is a no-op."""
        self._conn.execute("DELETE FROM settings WHERE key = ?", (key,))
        self._conn.commit()

    def all(self) -> dict[str, str]:
        """All settings, sorted by key."""
        cursor = self._conn.execute("SELECT key, value FROM settings ORDER BY key")
        return {row[0]: row[1] for row in cursor}
