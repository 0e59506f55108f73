"""
AppServices - The stores an application needs, built once and passed around.

Usage:
    services = AppServices(load_settings())
    services.init()
    ...
    services.teardown()
"""

import logging
from typing import Optional

from lingualeap.config import Settings

from .auth import AuthStore
from .progress import ProgressStore
from .questions import QuestionBank
from .storage import KeyValueStore


logger = logging.getLogger(__name__)


class AppServices:
    """
    Owns the storage and the three stores.

    Consumers receive this object (or a single store from it) explicitly;
    there is no module-level instance.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.storage: Optional[KeyValueStore] = None
        self.progress: Optional[ProgressStore] = None
        self.auth: Optional[AuthStore] = None
        self.questions: Optional[QuestionBank] = None

    @property
    def is_ready(self) -> bool:
        return self.storage is not None

    def init(self) -> "AppServices":
        """
        Open storage and load every store.

        Never raises for storage problems: an unusable storage file leaves
        the stores on their defaults, and they keep working in memory.
        """
        if self.is_ready:
            return self

        self.storage = KeyValueStore(self.settings.storage_path)
        self.progress = ProgressStore(self.storage)
        self.auth = AuthStore(self.storage, self.settings.admin_password)
        self.questions = QuestionBank(self.storage)

        self.progress.load()
        self.auth.load()
        self.questions.load()
        logger.info(f"Services ready (storage: {self.settings.storage_path})")
        return self

    def teardown(self):
        """Drop the stores. Everything was already persisted on mutation."""
        self.questions = None
        self.auth = None
        self.progress = None
        self.storage = None
        logger.info("Services shut down")
