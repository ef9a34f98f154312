"""
Tests for the users application layer (use cases).

Tests use cases against the in-memory store and failing stubs.
Each test verifies orchestration logic, not storage details.
"""

import threading
from typing import Optional

import pytest

from forgery.application.users.create_user import CreateUserUseCase
from forgery.application.users.dtos import CreateUserCommand, LookupUserQuery
from forgery.application.users.login import LoginUseCase
from forgery.application.users.lookup_user import LookupUserUseCase
from forgery.domain.users.entities import User
from forgery.domain.users.errors import (
    UserCreateFailedError,
    UserLookupFailedError,
    UsernameAlreadyExistsError,
    UserNotFoundError,
    UserStoreError,
    UserWriteFailedError,
)
from forgery.infrastructure.users.in_memory_user_store import InMemoryUserStore


class FailingUserStore(InMemoryUserStore):
    """In-memory store whose selected operations raise UserStoreError."""

    def __init__(self, failing: set[str]) -> None:
        super().__init__()
        self.failing = failing
        self.create_calls = 0

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.failing:
            raise UserStoreError(operation, "backend unavailable")

    def create_user(self, user: User, password: str) -> str:
        self.create_calls += 1
        self._maybe_fail("create_user")
        return super().create_user(user, password)

    def get_user_by_guid(self, user_guid: str) -> Optional[User]:
        self._maybe_fail("get_user_by_guid")
        return super().get_user_by_guid(user_guid)

    def get_user_by_username(self, username: str) -> Optional[User]:
        self._maybe_fail("get_user_by_username")
        return super().get_user_by_username(username)


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


class TestCreateUserUseCase:
    """Tests for the CreateUserUseCase."""

    def test_creates_user(self, store: InMemoryUserStore) -> None:
        result = CreateUserUseCase(store).execute(CreateUserCommand("me", "password"))
        user = store.get_user_by_guid(result.user_guid)
        assert user is not None
        assert user.username == "me"
        assert store.validate_credentials("me", "password") is True

    def test_duplicate_username_raises_without_write(self) -> None:
        store = FailingUserStore(failing=set())
        use_case = CreateUserUseCase(store)
        first = use_case.execute(CreateUserCommand("me", "password"))

        with pytest.raises(UsernameAlreadyExistsError) as exc_info:
            use_case.execute(CreateUserCommand("me", "other"))

        assert exc_info.value.username == "me"
        assert store.create_calls == 1
        assert store.validate_credentials("me", "password") is True
        assert store.get_user_by_username("me").user_guid == first.user_guid

    def test_check_failure_raises_create_failed(self) -> None:
        store = FailingUserStore(failing={"get_user_by_username"})
        with pytest.raises(UserCreateFailedError):
            CreateUserUseCase(store).execute(CreateUserCommand("me", "pw"))
        assert store.create_calls == 0

    def test_write_failure_raises_write_failed(self) -> None:
        store = FailingUserStore(failing={"create_user"})
        with pytest.raises(UserWriteFailedError) as exc_info:
            CreateUserUseCase(store).execute(CreateUserCommand("me", "pw"))
        assert exc_info.value.cause.operation == "create_user"

    def test_concurrent_creates_of_one_username(self, store: InMemoryUserStore) -> None:
        """Only one of many simultaneous creates for a username succeeds."""
        use_case = CreateUserUseCase(store)
        barrier = threading.Barrier(8)
        outcomes: list[str] = []
        lock = threading.Lock()

        def attempt() -> None:
            barrier.wait()
            try:
                use_case.execute(CreateUserCommand("race", "pw"))
                outcome = "created"
            except UsernameAlreadyExistsError:
                outcome = "conflict"
            with lock:
                outcomes.append(outcome)

        threads = [threading.Thread(target=attempt) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5)

        assert outcomes.count("created") == 1
        assert outcomes.count("conflict") == 7


class TestLookupUserUseCase:
    """Tests for the LookupUserUseCase."""

    def test_returns_public_fields(self, store: InMemoryUserStore) -> None:
        user_guid = store.create_user(User(username="you"), "password")
        result = LookupUserUseCase(store).execute(LookupUserQuery(user_guid))
        assert result.user_guid == user_guid
        assert result.username == "you"
        assert not hasattr(result, "password")

    def test_missing_user_raises_not_found(self, store: InMemoryUserStore) -> None:
        with pytest.raises(UserNotFoundError) as exc_info:
            LookupUserUseCase(store).execute(LookupUserQuery("not_here"))
        assert exc_info.value.user_guid == "not_here"

    def test_deleted_user_raises_not_found(self, store: InMemoryUserStore) -> None:
        user_guid = store.create_user(User(username="you"), "password")
        store.delete_user(user_guid)
        with pytest.raises(UserNotFoundError):
            LookupUserUseCase(store).execute(LookupUserQuery(user_guid))

    def test_store_failure_raises_lookup_failed(self) -> None:
        store = FailingUserStore(failing={"get_user_by_guid"})
        with pytest.raises(UserLookupFailedError) as exc_info:
            LookupUserUseCase(store).execute(LookupUserQuery("abc"))
        assert exc_info.value.user_guid == "abc"


class TestLoginUseCase:
    """Tests for the LoginUseCase."""

    def test_login_is_noop(self) -> None:
        assert LoginUseCase().execute() is None
