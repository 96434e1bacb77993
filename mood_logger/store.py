"""
Mood storage implementation for the Mood Logger.

This module provides an append-only SQLite store holding one table of mood
entries. The schema is created on demand, so a fresh database file needs no
separate setup step.
"""

import logging
import sqlite3
from os import PathLike
from types import TracebackType

from .models import MoodEntry

logger = logging.getLogger(__name__)

CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS mood (
    id         INTEGER PRIMARY KEY,
    timestamp  INTEGER NOT NULL,
    value      REAL NOT NULL,
    message    TEXT
)
"""

INSERT_ENTRY = "INSERT INTO mood (timestamp, value, message) VALUES (?, ?, ?)"


class MoodStore:
    """
    SQLite-backed mood storage.

    The store owns a single connection for its lifetime. Entries are only
    ever appended; nothing here updates or deletes a row. Engine errors are
    left to propagate as ``sqlite3.Error``.
    """

    def __init__(self, path: str | PathLike[str]) -> None:
        self.path = path
        self._conn = sqlite3.connect(path)
        logger.debug("Opened database %s", path)

    def ensure_schema(self) -> None:
        """Create the mood table if it does not already exist."""
        with self._conn:
            self._conn.execute(CREATE_TABLE)

    def insert(self, entry: MoodEntry) -> int:
        """
        Append a mood entry.

        Args:
            entry: The entry to store; its ``id`` is set to the new row id

        Returns:
            The number of rows inserted
        """
        with self._conn:
            cursor = self._conn.execute(
                INSERT_ENTRY, (entry.timestamp, entry.value, entry.message)
            )
        entry.id = cursor.lastrowid
        logger.debug("Inserted mood entry with id %s", entry.id)
        return cursor.rowcount

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "MoodStore":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
