"""Shared fixtures: every test gets its own SQLite storage file."""

import pytest

from lingualeap.classroom import KeyValueStore, ProgressStore, AuthStore, QuestionBank
from lingualeap.errors import StorageUnavailable


ADMIN_PASSWORD = "admin123"


class FailingStorage(KeyValueStore):
    """Storage whose reads and writes always fail."""

    def get_raw(self, key):
        raise StorageUnavailable(f"read of {key} failed")

    def set_raw(self, key, value):
        raise StorageUnavailable(f"write of {key} failed")

    def set_many(self, items):
        raise StorageUnavailable("write failed")

    def remove(self, *keys):
        raise StorageUnavailable("remove failed")


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "storage.db"


@pytest.fixture
def storage(db_path):
    return KeyValueStore(db_path)


@pytest.fixture
def failing_storage(tmp_path):
    return FailingStorage(tmp_path / "failing.db")


@pytest.fixture
def progress(storage):
    store = ProgressStore(storage)
    store.load()
    return store


@pytest.fixture
def auth(storage):
    store = AuthStore(storage, ADMIN_PASSWORD)
    store.load()
    return store


@pytest.fixture
def bank(storage):
    store = QuestionBank(storage)
    store.load()
    return store
