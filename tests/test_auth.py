"""
Admin gate tests.
"""

import pytest

from lingualeap.classroom import AuthStore, ADMIN_FLAG_KEY
from lingualeap.schemas import AuthState

ADMIN_PASSWORD = "admin123"


def reload(storage) -> AuthStore:
    store = AuthStore(storage, ADMIN_PASSWORD)
    store.load()
    return store


class TestLogin:

    def test_starts_as_guest(self, auth):
        assert auth.state == AuthState.GUEST
        assert not auth.is_admin

    def test_correct_password(self, auth):
        assert auth.login("admin123") is True
        assert auth.state == AuthState.ADMIN
        assert auth.is_admin

    def test_wrong_password(self, auth, storage):
        assert auth.login("wrong") is False
        assert auth.state == AuthState.GUEST
        assert storage.get_raw(ADMIN_FLAG_KEY) is None

    @pytest.mark.parametrize("password", ["ADMIN123", "admin123 ", " admin123", "admin12", ""])
    def test_exact_match_only(self, auth, password):
        assert auth.login(password) is False
        assert not auth.is_admin

    def test_configured_secret(self, storage):
        store = AuthStore(storage, "s3cret")
        store.load()
        assert store.login("admin123") is False
        assert store.login("s3cret") is True

    def test_retry_after_failure(self, auth):
        assert auth.login("nope") is False
        assert auth.login("admin123") is True


class TestPersistence:

    def test_login_survives_reload(self, auth, storage):
        auth.login("admin123")
        assert storage.get(ADMIN_FLAG_KEY) is True
        assert reload(storage).is_admin

    def test_logout_clears_flag(self, auth, storage):
        auth.login("admin123")
        auth.logout()
        assert auth.state == AuthState.GUEST
        assert storage.get_raw(ADMIN_FLAG_KEY) is None
        assert not reload(storage).is_admin

    def test_logout_as_guest(self, auth):
        auth.logout()
        assert auth.state == AuthState.GUEST

    def test_string_flag_accepted(self, storage):
        storage.set(ADMIN_FLAG_KEY, "true")
        assert reload(storage).is_admin

    @pytest.mark.parametrize("raw", ["false", "1", '"yes"', "{broken"])
    def test_other_flags_mean_guest(self, storage, raw):
        storage.set_raw(ADMIN_FLAG_KEY, raw)
        assert not reload(storage).is_admin

    def test_unreadable_storage_means_guest(self, failing_storage):
        store = AuthStore(failing_storage, ADMIN_PASSWORD)
        store.load()
        assert store.state == AuthState.GUEST

    def test_login_works_when_flag_cannot_be_saved(self, failing_storage):
        store = AuthStore(failing_storage, ADMIN_PASSWORD)
        store.load()
        assert store.login("admin123") is True
        store.logout()
        assert not store.is_admin
