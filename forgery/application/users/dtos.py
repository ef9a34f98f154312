"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for creating a user.

    Attributes:
        username: Requested login name.
        password: Password to store for the new user.
    """

    username: str
    password: str


@dataclass(frozen=True)
class CreateUserResult:
    """Output DTO for a created user.

    Attributes:
        user_guid: Identifier generated by the user store.
    """

    user_guid: str


@dataclass(frozen=True)
class LookupUserQuery:
    """Input DTO for looking up a user by identifier."""

    user_guid: str


@dataclass(frozen=True)
class UserResult:
    """Public projection of a user. Credentials are never included."""

    user_guid: str
    username: str
