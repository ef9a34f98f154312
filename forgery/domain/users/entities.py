"""
Domain entities for the users bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A registered user account.

    Users are never mutated once stored. The identifier is assigned
    by the user store on creation; a user built by a caller before
    creation carries an empty identifier.

    Attributes:
        username: Login name, unique among stored users.
        user_guid: Store-generated identifier.
    """

    username: str
    user_guid: str = ""
