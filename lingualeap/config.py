"""
Runtime configuration for LinguaLeap.

Values come from environment variables; a ``.env`` file in the project root
is loaded first if present.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_STORAGE_DIR = Path.home() / ".lingualeap"
DEFAULT_STORAGE_PATH = DEFAULT_STORAGE_DIR / "storage.db"

# Shared teaching credential; see lingualeap/classroom/auth.py
DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    storage_path: Path = DEFAULT_STORAGE_PATH
    admin_password: str = DEFAULT_ADMIN_PASSWORD
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(env_file: Path | None = None) -> Settings:
    """
    Build settings from the environment.

    Args:
        env_file: Optional .env file (default: PROJECT_ROOT/.env)

    Returns:
        Settings with defaults for anything not set
    """
    load_dotenv(env_file or PROJECT_ROOT / ".env")

    storage_path = os.getenv("LINGUALEAP_STORAGE_PATH")
    return Settings(
        storage_path=Path(storage_path).expanduser() if storage_path else DEFAULT_STORAGE_PATH,
        admin_password=os.getenv("LINGUALEAP_ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD),
        log_level=os.getenv("LINGUALEAP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
