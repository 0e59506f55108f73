"""
Settings and service container tests.
"""

import pytest

from lingualeap.classroom import AppServices
from lingualeap.config import (
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_STORAGE_PATH,
    Settings,
    load_settings,
)


ENV_VARS = ("LINGUALEAP_STORAGE_PATH", "LINGUALEAP_ADMIN_PASSWORD", "LINGUALEAP_LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch restores (removes) anything load_dotenv adds
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestSettings:

    def test_defaults(self, clean_env, tmp_path):
        settings = load_settings(tmp_path / "missing.env")
        assert settings.storage_path == DEFAULT_STORAGE_PATH
        assert settings.admin_password == DEFAULT_ADMIN_PASSWORD == "admin123"
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, clean_env, tmp_path):
        clean_env.setenv("LINGUALEAP_STORAGE_PATH", str(tmp_path / "x.db"))
        clean_env.setenv("LINGUALEAP_ADMIN_PASSWORD", "letmein")
        clean_env.setenv("LINGUALEAP_LOG_LEVEL", "debug")
        settings = load_settings(tmp_path / "missing.env")
        assert settings.storage_path == tmp_path / "x.db"
        assert settings.admin_password == "letmein"
        assert settings.log_level == "DEBUG"

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("LINGUALEAP_ADMIN_PASSWORD=fromfile\n", encoding="utf-8")
        assert load_settings(env_file).admin_password == "fromfile"


class TestAppServices:

    def test_init_loads_stores(self, tmp_path):
        services = AppServices(Settings(storage_path=tmp_path / "app.db")).init()
        assert services.is_ready
        assert services.progress.total_xp == 0
        assert not services.auth.is_admin
        assert services.questions.count("Spanish") == 5

    def test_init_twice_keeps_stores(self, tmp_path):
        services = AppServices(Settings(storage_path=tmp_path / "app.db")).init()
        progress = services.progress
        services.init()
        assert services.progress is progress

    def test_state_survives_restart(self, tmp_path):
        settings = Settings(storage_path=tmp_path / "app.db")
        services = AppServices(settings).init()
        services.progress.record_completion("spanish", 4, 5)
        services.auth.login("admin123")
        services.teardown()
        assert not services.is_ready

        restarted = AppServices(settings).init()
        assert restarted.progress.total_xp == 40
        assert restarted.auth.is_admin

    def test_custom_password(self, tmp_path):
        services = AppServices(Settings(storage_path=tmp_path / "app.db", admin_password="pw")).init()
        assert not services.auth.login("admin123")
        assert services.auth.login("pw")

    def test_unusable_storage_starts_on_defaults(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory", encoding="utf-8")
        services = AppServices(Settings(storage_path=blocker / "app.db")).init()

        assert services.is_ready
        assert services.progress.total_xp == 0
        assert not services.auth.is_admin
        assert services.questions.count("Spanish") == 5

        assert services.progress.record_completion("spanish", 3, 5) == 30
        assert services.progress.get_language_progress("spanish").completed_lessons == 1
        assert services.auth.login("admin123")
