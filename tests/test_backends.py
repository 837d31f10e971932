"""
Backend tests for DesignDesk storage.
"""

import pytest

from designdesk.errors import StorageError
from designdesk.schemas import Skill
from designdesk.storage import DataStore, MemoryBackend, SqliteBackend


class TestMemoryBackend:
    """Test the in-memory backend."""

    def test_get_missing(self):
        assert MemoryBackend().get("k") is None

    def test_set_get_delete(self):
        backend = MemoryBackend()
        backend.set("k", "v")
        assert backend.get("k") == "v"
        backend.delete("k")
        assert backend.get("k") is None

    def test_delete_missing_is_noop(self):
        backend = MemoryBackend({"a": "1"})
        backend.delete("b")
        assert backend.keys() == ["a"]

    def test_initial_is_copied(self):
        initial = {"a": "1"}
        backend = MemoryBackend(initial)
        backend.set("b", "2")
        assert initial == {"a": "1"}


class TestSqliteBackend:
    """Test the SQLite key-value backend."""

    def test_creates_parent_directory(self, tmp_path):
        db_path = tmp_path / "nested" / "storage.db"
        SqliteBackend(db_path)
        assert db_path.exists()

    def test_set_get(self, tmp_path):
        backend = SqliteBackend(tmp_path / "storage.db")
        assert backend.get("k") is None
        backend.set("k", "v1")
        assert backend.get("k") == "v1"

    def test_set_overwrites(self, tmp_path):
        backend = SqliteBackend(tmp_path / "storage.db")
        backend.set("k", "v1")
        backend.set("k", "v2")
        assert backend.get("k") == "v2"

    def test_delete(self, tmp_path):
        backend = SqliteBackend(tmp_path / "storage.db")
        backend.set("k", "v")
        backend.delete("k")
        assert backend.get("k") is None
        backend.delete("k")

    def test_survives_reopen(self, tmp_path):
        db_path = tmp_path / "storage.db"
        SqliteBackend(db_path).set("k", "Марія")
        assert SqliteBackend(db_path).get("k") == "Марія"

    def test_unopenable_path_raises(self, tmp_path):
        # A directory can't be opened as a database file
        with pytest.raises(StorageError):
            SqliteBackend(tmp_path)

    def test_store_on_sqlite(self, tmp_path):
        db_path = tmp_path / "storage.db"
        DataStore(SqliteBackend(db_path)).save_skill(Skill(id="s1", name="Figma"))
        reopened = DataStore(SqliteBackend(db_path))
        assert [s.name for s in reopened.get_skills()] == ["Figma"]
