"""
Tests for the key-value storage backends.

The database backend runs against a temporary SQLite file.
"""

import threading
from unittest.mock import patch

import pytest

from streamlit_app.browser.errors import StorageError
from streamlit_app.browser.storage import JsonFileStorage, MemoryStorage, SqlStorage, get_storage


class TestMemoryStorage:
    """Test cases for MemoryStorage."""

    def test_missing_key_reads_none(self):
        assert MemoryStorage().read("favorites") is None

    def test_write_then_read(self):
        storage = MemoryStorage()
        storage.write("favorites", "[]")
        storage.write("favorites", '[{"href": "x"}]')
        assert storage.read("favorites") == '[{"href": "x"}]'

    @pytest.mark.parametrize("key", ["", "../etc/passwd", "with space", "a/b"])
    def test_invalid_keys_rejected(self, key):
        with pytest.raises(ValueError):
            MemoryStorage().write(key, "value")


class TestJsonFileStorage:
    """Test cases for JsonFileStorage."""

    def test_missing_file_reads_none(self, tmp_path):
        assert JsonFileStorage(tmp_path).read("favorites") is None

    def test_write_creates_directory_and_file(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "nested" / "data")
        storage.write("favorites", "[1, 2]")

        path = storage.path_for("favorites")
        assert path.name == "favorites.json"
        assert path.read_text(encoding="utf-8") == "[1, 2]"
        assert storage.read("favorites") == "[1, 2]"

    def test_no_temporary_file_left_behind(self, tmp_path):
        storage = JsonFileStorage(tmp_path)
        storage.write("favorites", "[]")
        assert [p.name for p in tmp_path.iterdir()] == ["favorites.json"]

    def test_unwritable_location_raises_storage_error(self, tmp_path):
        """Test that OS errors surface as StorageError."""
        blocker = tmp_path / "blocked"
        blocker.write_text("not a directory")

        with pytest.raises(StorageError):
            JsonFileStorage(blocker).write("favorites", "[]")

    def test_values_survive_a_new_instance(self, tmp_path):
        JsonFileStorage(tmp_path).write("favorites", '["kept"]')
        assert JsonFileStorage(tmp_path).read("favorites") == '["kept"]'

    def test_concurrent_writers_do_not_collide(self, tmp_path):
        """Test that two instances writing at once both succeed."""
        writers = [JsonFileStorage(tmp_path), JsonFileStorage(tmp_path)]
        errors = []

        def write_many(storage, label):
            for i in range(50):
                try:
                    storage.write("favorites", f'["{label}-{i}"]')
                except StorageError as e:
                    errors.append(e)

        threads = [threading.Thread(target=write_many, args=(s, label)) for s, label in zip(writers, "ab")]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert JsonFileStorage(tmp_path).read("favorites") in ('["a-49"]', '["b-49"]')
        assert [p.name for p in tmp_path.iterdir()] == ["favorites.json"]


class TestSqlStorage:
    """Test cases for SqlStorage on SQLite."""

    def test_write_read_and_overwrite(self, tmp_path):
        storage = SqlStorage(f"sqlite:///{tmp_path / 'kv.db'}")
        try:
            assert storage.read("favorites") is None
            storage.write("favorites", "[]")
            storage.write("favorites", '["second"]')
            assert storage.read("favorites") == '["second"]'
        finally:
            storage.dispose()

    def test_values_survive_a_new_engine(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'kv.db'}"
        first = SqlStorage(url)
        first.write("favorites", '["kept"]')
        first.dispose()

        second = SqlStorage(url)
        try:
            assert second.read("favorites") == '["kept"]'
        finally:
            second.dispose()

    def test_bad_url_raises_storage_error(self):
        with pytest.raises(StorageError):
            SqlStorage("nosuchdialect://localhost/db")

    @patch("streamlit_app.browser.storage.create_engine", side_effect=ModuleNotFoundError("No module named 'psycopg2'"))
    def test_missing_driver_raises_storage_error(self, mock_engine):
        with pytest.raises(StorageError, match="psycopg2"):
            SqlStorage("postgresql://localhost/recipes")


class TestGetStorage:
    """Test cases for backend selection."""

    def test_file_storage_without_database_url(self, tmp_path):
        storage = get_storage(database_url=None, directory=tmp_path)
        assert isinstance(storage, JsonFileStorage)
        assert storage.directory == tmp_path

    def test_database_storage_with_url(self, tmp_path):
        storage = get_storage(database_url=f"sqlite:///{tmp_path / 'kv.db'}", directory=tmp_path)
        assert isinstance(storage, SqlStorage)
        storage.dispose()

    def test_falls_back_to_files_when_database_unavailable(self, tmp_path):
        storage = get_storage(database_url="nosuchdialect://localhost/db", directory=tmp_path)
        assert isinstance(storage, JsonFileStorage)

    @patch("streamlit_app.browser.storage.create_engine", side_effect=ModuleNotFoundError("No module named 'psycopg2'"))
    def test_falls_back_to_files_when_driver_missing(self, mock_engine, tmp_path):
        storage = get_storage(database_url="postgresql://localhost/recipes", directory=tmp_path)
        assert isinstance(storage, JsonFileStorage)
