"""
Tests for the MoodStore implementation.

These tests verify schema creation, inserts and that stored values can be
read back from the table unchanged.
"""

import sqlite3
import time

import pydantic
import pytest

from mood_logger.models import MoodEntry
from mood_logger.store import MoodStore


def _rows(path):
    with sqlite3.connect(path) as conn:
        return conn.execute(
            "SELECT id, timestamp, value, message FROM mood ORDER BY id"
        ).fetchall()


class TestMoodStore:
    """Test suite for MoodStore functionality."""

    @pytest.fixture(autouse=True)
    def setup_store(self, tmp_path):
        """Set up a fresh database path for each test."""
        self.path = tmp_path / "mood.db"

    def test_ensure_schema_is_idempotent(self):
        """Test that creating the schema twice does not fail."""
        with MoodStore(self.path) as store:
            store.ensure_schema()
            store.ensure_schema()

        with MoodStore(self.path) as store:
            store.ensure_schema()

        with sqlite3.connect(self.path) as conn:
            tables = conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table'"
            ).fetchall()
        assert tables == [("mood",)]

    def test_schema_columns(self):
        """Test the column layout of the mood table."""
        with MoodStore(self.path) as store:
            store.ensure_schema()

        with sqlite3.connect(self.path) as conn:
            columns = conn.execute("PRAGMA table_info(mood)").fetchall()

        # (cid, name, type, notnull, default, pk)
        assert [(c[1], c[2], c[3], c[5]) for c in columns] == [
            ("id", "INTEGER", 0, 1),
            ("timestamp", "INTEGER", 1, 0),
            ("value", "REAL", 1, 0),
            ("message", "TEXT", 0, 0),
        ]

    def test_insert_and_read_back(self):
        """Test that inserted values read back unchanged."""
        entry = MoodEntry(timestamp=1714552200, value=3.7, message="rainy day")

        with MoodStore(self.path) as store:
            store.ensure_schema()
            count = store.insert(entry)

        assert count == 1
        assert entry.id == 1
        assert _rows(self.path) == [(1, 1714552200, 3.7, "rainy day")]

    def test_missing_message_is_null(self):
        """Test that an absent message is stored as NULL."""
        with MoodStore(self.path) as store:
            store.ensure_schema()
            store.insert(MoodEntry(timestamp=0, value=5.0))

        assert _rows(self.path) == [(1, 0, 5.0, None)]

    def test_ids_increase_with_each_insert(self):
        """Test that entries are appended with increasing ids."""
        with MoodStore(self.path) as store:
            store.ensure_schema()
            for value in (1.0, 2.0, 3.0):
                store.insert(MoodEntry(value=value))

        rows = _rows(self.path)
        assert [row[0] for row in rows] == [1, 2, 3]
        assert [row[2] for row in rows] == [1.0, 2.0, 3.0]

    def test_message_is_bound_not_interpolated(self):
        """Test that SQL in a message is stored as plain text."""
        message = "'); DROP TABLE mood; --"

        with MoodStore(self.path) as store:
            store.ensure_schema()
            store.insert(MoodEntry(timestamp=1, value=1.0, message=message))

        assert _rows(self.path) == [(1, 1, 1.0, message)]

    def test_insert_without_schema_fails(self):
        """Test that engine errors propagate to the caller."""
        with MoodStore(self.path) as store:
            with pytest.raises(sqlite3.OperationalError):
                store.insert(MoodEntry(value=1.0))

    def test_unopenable_path_fails(self, tmp_path):
        """Test that a path in a missing directory raises a sqlite3 error."""
        with pytest.raises(sqlite3.Error):
            MoodStore(tmp_path / "missing" / "mood.db")


class TestMoodEntry:
    """Test suite for the MoodEntry model."""

    def test_default_timestamp_is_now(self):
        """Test that the timestamp defaults to the current time."""
        before = int(time.time())
        entry = MoodEntry(value=4.0)
        after = int(time.time())

        assert before <= entry.timestamp <= after
        assert entry.id is None
        assert entry.message is None

    @pytest.mark.parametrize("value", [-0.5, 10.5])
    def test_value_out_of_range(self, value):
        """Test that the model refuses ratings outside the range."""
        with pytest.raises(pydantic.ValidationError):
            MoodEntry(value=value)
