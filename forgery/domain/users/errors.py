"""
Domain-specific errors for the users bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses and error envelopes at the shared layer.
No framework imports allowed.
"""


class UserDomainError(Exception):
    """Base error for all users domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UserStoreError(UserDomainError):
    """Raised by a user store when an operation cannot be completed."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"User store {operation} failed: {reason}")
        self.operation = operation
        self.reason = reason


class UsernameAlreadyExistsError(UserDomainError):
    """Raised when creating a user whose username is already taken."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username already exists: {username}")
        self.username = username


class UserNotFoundError(UserDomainError):
    """Raised when no user matches the requested identifier."""

    def __init__(self, user_guid: str) -> None:
        super().__init__(f"User not found: {user_guid}")
        self.user_guid = user_guid


class UserCreateFailedError(UserDomainError):
    """Raised when the store fails during the duplicate-username check."""

    def __init__(self, cause: UserStoreError) -> None:
        super().__init__(f"Create user check failed: {cause.reason}")
        self.cause = cause


class UserWriteFailedError(UserDomainError):
    """Raised when the store fails while writing a new user."""

    def __init__(self, cause: UserStoreError) -> None:
        super().__init__(f"Create user write failed: {cause.reason}")
        self.cause = cause


class UserLookupFailedError(UserDomainError):
    """Raised when the store fails while looking a user up."""

    def __init__(self, user_guid: str, cause: UserStoreError) -> None:
        super().__init__(f"Lookup of user {user_guid} failed: {cause.reason}")
        self.user_guid = user_guid
        self.cause = cause
