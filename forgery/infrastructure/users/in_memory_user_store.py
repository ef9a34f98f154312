"""
Adapter: In-memory user store.

Implements the UserStore port with two dictionaries:
- users keyed by identifier
- stored credentials keyed by username

Nothing survives a restart. One reentrant lock guards both maps, so
each operation is atomic and callers can group operations with atomic().
"""

import logging
import threading
from contextlib import AbstractContextManager
from dataclasses import replace
from typing import Callable, Optional
from uuid import uuid4

from forgery.domain.users.entities import User
from forgery.domain.users.ports import CredentialPolicy, UserStore
from forgery.infrastructure.users.credentials import PlaintextCredentialPolicy

logger = logging.getLogger(__name__)


def _random_guid() -> str:
    return str(uuid4())


class InMemoryUserStore(UserStore):
    """Concrete adapter keeping users and credentials in process memory.

    Args:
        guid_factory: Callable producing candidate identifiers.
            Defaults to random UUID4 strings.
        credential_policy: How passwords are stored and checked.
            Defaults to plaintext comparison.
    """

    def __init__(
        self,
        guid_factory: Callable[[], str] = _random_guid,
        credential_policy: Optional[CredentialPolicy] = None,
    ) -> None:
        self._guid_factory = guid_factory
        self._credential_policy = credential_policy or PlaintextCredentialPolicy()
        self._lock = threading.RLock()
        self._users: dict[str, User] = {}
        self._credentials: dict[str, str] = {}
        self._issued_guids: set[str] = set()

    def atomic(self) -> AbstractContextManager:
        return self._lock

    def create_user(self, user: User, password: str) -> str:
        """Store a new user under a freshly generated identifier.

        Identifiers are never reissued, even after the user is deleted.
        """
        with self._lock:
            user_guid = self._new_guid()
            self._users[user_guid] = replace(user, user_guid=user_guid)
            self._credentials[user.username] = self._credential_policy.protect(password)
            logger.debug("Stored user %s", user_guid)
            return user_guid

    def delete_user(self, user_guid: str) -> None:
        with self._lock:
            user = self.get_user_by_guid(user_guid)
            if user is None:
                return
            del self._users[user_guid]
            self._credentials.pop(user.username, None)
            logger.debug("Deleted user %s", user_guid)

    def get_user_by_guid(self, user_guid: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_guid)

    def get_user_by_username(self, username: str) -> Optional[User]:
        # Linear scan; there is no secondary index.
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return user
            return None

    def validate_credentials(self, username: str, password: str) -> bool:
        with self._lock:
            stored = self._credentials.get(username)
            if stored is None:
                return False
            return self._credential_policy.verify(stored, password)

    def _new_guid(self) -> str:
        user_guid = self._guid_factory()
        while user_guid in self._issued_guids:
            logger.warning("Identifier collision on %s, regenerating", user_guid)
            user_guid = self._guid_factory()
        self._issued_guids.add(user_guid)
        return user_guid
