"""
Use case: Look up a user by identifier.

Input: LookupUserQuery (user_guid)
Output: UserResult
Side effects: None.
Failure cases: UserNotFoundError, UserLookupFailedError.
"""

from forgery.application.users.dtos import LookupUserQuery, UserResult
from forgery.domain.users.errors import (
    UserLookupFailedError,
    UserNotFoundError,
    UserStoreError,
)
from forgery.domain.users.ports import UserStore


class LookupUserUseCase:
    """Fetches a single user and projects it to its public fields."""

    def __init__(self, user_store: UserStore) -> None:
        self._user_store = user_store

    def execute(self, query: LookupUserQuery) -> UserResult:
        try:
            user = self._user_store.get_user_by_guid(query.user_guid)
        except UserStoreError as exc:
            raise UserLookupFailedError(query.user_guid, exc) from exc

        if user is None:
            raise UserNotFoundError(query.user_guid)

        return UserResult(user_guid=user.user_guid, username=user.username)
