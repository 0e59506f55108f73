"""
AuthStore - Single shared-password gate for question editing.

The unlocked state is kept in the admin_flag key so it survives a restart.

This gate is for a teaching setting only. The password lives in local
configuration and the flag in a local file; anyone with access to either can
bypass it. Do not reuse it to protect anything real.
"""

import hmac
import logging

from lingualeap.errors import CorruptPersistedState, StorageUnavailable
from lingualeap.schemas import AuthState

from .storage import KeyValueStore


logger = logging.getLogger(__name__)

ADMIN_FLAG_KEY = "admin_flag"


class AuthStore:
    """Two states, GUEST and ADMIN. A wrong password is a False result, not an error."""

    def __init__(self, storage: KeyValueStore, admin_password: str):
        self.storage = storage
        self._admin_password = admin_password
        self.state = AuthState.GUEST

    @property
    def is_admin(self) -> bool:
        return self.state == AuthState.ADMIN

    def load(self):
        """Enter ADMIN if the persisted flag is true, otherwise GUEST."""
        try:
            flag = self.storage.get(ADMIN_FLAG_KEY, False)
        except (StorageUnavailable, CorruptPersistedState) as e:
            logger.warning(f"Ignoring stored admin flag: {e}")
            flag = False

        # Accept the string form too ("true")
        self.state = AuthState.ADMIN if flag is True or flag == "true" else AuthState.GUEST
        logger.info(f"Auth state loaded: {self.state.value}")

    def login(self, password: str) -> bool:
        """
        Try to unlock admin mode.

        Args:
            password: Entered password (case-sensitive, exact match)

        Returns:
            True if the password matched
        """
        if not hmac.compare_digest(password.encode("utf-8"), self._admin_password.encode("utf-8")):
            logger.info("Admin login rejected")
            return False

        self.state = AuthState.ADMIN
        try:
            self.storage.set(ADMIN_FLAG_KEY, True)
        except StorageUnavailable as e:
            logger.error(f"Admin flag not saved: {e}")
        logger.info("Admin logged in")
        return True

    def logout(self):
        """Return to GUEST and clear the persisted flag."""
        self.state = AuthState.GUEST
        try:
            self.storage.remove(ADMIN_FLAG_KEY)
        except StorageUnavailable as e:
            logger.error(f"Admin flag not cleared: {e}")
        logger.info("Admin logged out")
