"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional

from forgery.domain.users.entities import User


class CredentialPolicy(ABC):
    """Port for turning passwords into stored credentials and checking them."""

    @abstractmethod
    def protect(self, password: str) -> str:
        """Return the value to store for a newly set password."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, stored: str, candidate: str) -> bool:
        """Return True if ``candidate`` matches the stored credential."""
        raise NotImplementedError


class UserStore(ABC):
    """Port for storing and retrieving user accounts and credentials.

    Every operation may raise UserStoreError, even when a particular
    backend never does. Callers must handle it.
    """

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return a context manager holding the store's exclusive lock.

        Operations called inside the block run as one critical section,
        e.g. a username check followed by a create.
        """
        raise NotImplementedError

    @abstractmethod
    def create_user(self, user: User, password: str) -> str:
        """Store a new user and its credential.

        No duplicate check is performed here.

        Args:
            user: The user to store. Its identifier is ignored.
            password: The password to associate with the username.

        Returns:
            The newly generated user identifier.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_user(self, user_guid: str) -> None:
        """Remove a user and its credential. Unknown identifiers are a no-op."""
        raise NotImplementedError

    @abstractmethod
    def get_user_by_guid(self, user_guid: str) -> Optional[User]:
        """Return the user with this identifier, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        """Return the user with this username, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def validate_credentials(self, username: str, password: str) -> bool:
        """Return True iff a credential exists for username and matches."""
        raise NotImplementedError
