"""
Use case: Create a user account.

Input: CreateUserCommand (username, password)
Output: CreateUserResult
Side effects: Stores the user and its credential.
Failure cases: UsernameAlreadyExistsError, UserCreateFailedError,
UserWriteFailedError.
"""

import logging

from forgery.application.users.dtos import CreateUserCommand, CreateUserResult
from forgery.domain.users.entities import User
from forgery.domain.users.errors import (
    UserCreateFailedError,
    UsernameAlreadyExistsError,
    UserStoreError,
    UserWriteFailedError,
)
from forgery.domain.users.ports import UserStore

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Creates a user after checking the username is free.

    The check and the write run inside the store's atomic block, so two
    concurrent requests for one username cannot both succeed.
    """

    def __init__(self, user_store: UserStore) -> None:
        self._user_store = user_store

    def execute(self, command: CreateUserCommand) -> CreateUserResult:
        """Run the create-user use case.

        Args:
            command: The requested username and password.

        Returns:
            The identifier of the new user.

        Raises:
            UsernameAlreadyExistsError: If the username is taken. Nothing
                is written in that case.
            UserCreateFailedError: If the store fails during the check.
            UserWriteFailedError: If the store fails while writing.
        """
        with self._user_store.atomic():
            try:
                existing = self._user_store.get_user_by_username(command.username)
            except UserStoreError as exc:
                raise UserCreateFailedError(exc) from exc

            if existing is not None:
                raise UsernameAlreadyExistsError(command.username)

            try:
                user_guid = self._user_store.create_user(
                    User(username=command.username), command.password
                )
            except UserStoreError as exc:
                raise UserWriteFailedError(exc) from exc

        logger.info("Created user %s", user_guid)
        return CreateUserResult(user_guid=user_guid)
