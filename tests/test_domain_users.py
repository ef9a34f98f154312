"""
Tests for the users domain layer.

Tests domain entities and error classes in isolation.
No external dependencies or IO required.
"""

import dataclasses

import pytest

from forgery.domain.users.entities import User
from forgery.domain.users.errors import (
    UserCreateFailedError,
    UserDomainError,
    UserLookupFailedError,
    UsernameAlreadyExistsError,
    UserNotFoundError,
    UserStoreError,
    UserWriteFailedError,
)


class TestUserEntity:
    """Tests for the User entity."""

    def test_user_defaults_to_empty_guid(self) -> None:
        user = User(username="me")
        assert user.username == "me"
        assert user.user_guid == ""

    def test_user_is_immutable(self) -> None:
        user = User(username="me", user_guid="abc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            user.username = "you"  # type: ignore[misc]


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_username_exists_message(self) -> None:
        err = UsernameAlreadyExistsError("me")
        assert err.username == "me"
        assert "me" in err.message

    def test_user_not_found_message(self) -> None:
        err = UserNotFoundError("not_here")
        assert err.user_guid == "not_here"
        assert "not_here" in str(err)

    def test_store_error_carries_operation(self) -> None:
        err = UserStoreError("create", "connection lost")
        assert err.operation == "create"
        assert err.reason == "connection lost"
        assert "connection lost" in err.message

    def test_wrapping_errors_keep_cause(self) -> None:
        cause = UserStoreError("get_user_by_guid", "timeout")
        assert UserCreateFailedError(cause).cause is cause
        assert UserWriteFailedError(cause).cause is cause
        lookup = UserLookupFailedError("abc", cause)
        assert lookup.cause is cause
        assert lookup.user_guid == "abc"

    @pytest.mark.parametrize(
        "error",
        [
            UserStoreError("create", "x"),
            UsernameAlreadyExistsError("me"),
            UserNotFoundError("abc"),
        ],
    )
    def test_all_errors_share_base(self, error: Exception) -> None:
        assert isinstance(error, UserDomainError)
