"""
Key-value storage tests.
"""

import pytest

from lingualeap.classroom import KeyValueStore
from lingualeap.errors import CorruptPersistedState, StorageUnavailable


class TestKeyValueStore:

    def test_missing_key_returns_default(self, storage):
        assert storage.get("nothing") is None
        assert storage.get("nothing", 7) == 7

    def test_set_and_get(self, storage):
        storage.set("greeting", {"es": "Hola", "ja": "こんにちは"})
        assert storage.get("greeting") == {"es": "Hola", "ja": "こんにちは"}

    def test_overwrite(self, storage):
        storage.set("xp", 10)
        storage.set("xp", 20)
        assert storage.get("xp") == 20

    def test_set_many(self, storage):
        storage.set_many({"a": 1, "b": [1, 2]})
        assert storage.get("a") == 1
        assert storage.get("b") == [1, 2]

    def test_remove(self, storage):
        storage.set("a", 1)
        storage.set("b", 2)
        storage.remove("a", "missing")
        assert storage.get_raw("a") is None
        assert storage.get("b") == 2

    def test_values_survive_new_instance(self, storage, db_path):
        storage.set("flag", True)
        assert KeyValueStore(db_path).get("flag") is True

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "storage.db"
        KeyValueStore(path).set("a", 1)
        assert path.exists()

    def test_corrupt_value(self, storage):
        storage.set_raw("broken", "{oops")
        with pytest.raises(CorruptPersistedState) as exc_info:
            storage.get("broken")
        assert exc_info.value.key == "broken"

    def test_unopenable_path_fails_per_call(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory", encoding="utf-8")
        storage = KeyValueStore(blocker / "storage.db")
        with pytest.raises(StorageUnavailable):
            storage.get("xp")
        with pytest.raises(StorageUnavailable):
            storage.set("xp", 1)

    def test_directory_path(self, tmp_path):
        with pytest.raises(StorageUnavailable):
            KeyValueStore(tmp_path).get("xp")
