"""Unit tests for LocalStorage backends."""

import json
import tempfile
import threading
from pathlib import Path

import pytest

from eduniverse_i18n.services import InMemoryStorage, JsonFileStorage, StorageError


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for storage files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


class TestInMemoryStorage:

    def test_get_missing_returns_none(self):
        assert InMemoryStorage().get_item("nope") is None

    def test_set_get_remove(self):
        storage = InMemoryStorage()
        storage.set_item("k", "v")
        assert storage.get_item("k") == "v"
        storage.remove_item("k")
        assert storage.get_item("k") is None

    def test_remove_missing_is_noop(self):
        InMemoryStorage().remove_item("nope")


class TestJsonFileStorage:
    """Tests for the file-backed storage."""

    def test_missing_file_reads_as_empty(self, temp_dir):
        storage = JsonFileStorage(temp_dir / "storage.json")
        assert storage.get_item("translationCache") is None

    def test_set_item_creates_parent_directories(self, temp_dir):
        path = temp_dir / "nested" / "dir" / "storage.json"
        JsonFileStorage(path).set_item("k", "v")
        assert path.exists()

    def test_file_format_is_valid_json(self, temp_dir):
        path = temp_dir / "storage.json"
        storage = JsonFileStorage(path)
        storage.set_item("eduniverse-theme", '{"language": "es"}')

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["version"] == 1
        assert data["items"] == {"eduniverse-theme": '{"language": "es"}'}

    def test_values_survive_new_instance(self, temp_dir):
        path = temp_dir / "storage.json"
        JsonFileStorage(path).set_item("k", "こんにちは")
        assert JsonFileStorage(path).get_item("k") == "こんにちは"

    def test_remove_item_keeps_other_keys(self, temp_dir):
        storage = JsonFileStorage(temp_dir / "storage.json")
        storage.set_item("a", "1")
        storage.set_item("b", "2")
        storage.remove_item("a")
        assert storage.get_item("a") is None
        assert storage.get_item("b") == "2"

    def test_corrupted_file_raises_storage_error(self, temp_dir):
        path = temp_dir / "storage.json"
        path.write_text("{ invalid json }", encoding="utf-8")
        with pytest.raises(StorageError):
            JsonFileStorage(path).get_item("k")

    def test_unexpected_layout_raises_storage_error(self, temp_dir):
        path = temp_dir / "storage.json"
        path.write_text('["not", "an", "object"]', encoding="utf-8")
        with pytest.raises(StorageError):
            JsonFileStorage(path).get_item("k")

    def test_set_item_replaces_corrupted_file(self, temp_dir):
        path = temp_dir / "storage.json"
        path.write_text("{ invalid json }", encoding="utf-8")
        storage = JsonFileStorage(path)

        storage.set_item("k", "v")

        assert storage.get_item("k") == "v"
        assert json.loads(path.read_text(encoding="utf-8"))["items"] == {"k": "v"}

    def test_remove_item_replaces_corrupted_file(self, temp_dir):
        path = temp_dir / "storage.json"
        path.write_text("{ invalid json }", encoding="utf-8")
        storage = JsonFileStorage(path)

        storage.remove_item("k")
        storage.set_item("other", "1")

        assert storage.get_item("other") == "1"

    def test_concurrent_writers_keep_file_valid(self, temp_dir):
        path = temp_dir / "storage.json"
        storage = JsonFileStorage(path)

        def write(prefix):
            for i in range(50):
                storage.set_item(f"{prefix}-{i}", str(i))

        threads = [threading.Thread(target=write, args=(name,)) for name in "abcd"]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        items = json.loads(path.read_text(encoding="utf-8"))["items"]
        assert len(items) == 200
        assert not path.with_name("storage.json.tmp").exists()
