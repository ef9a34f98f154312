"""
Use case: Log in.

Placeholder that accepts every call. Credential checking is available
on the user store (validate_credentials) but no session or token
scheme exists yet to hand back to the caller.
"""


class LoginUseCase:
    """Accepts every login attempt."""

    def execute(self) -> None:
        return None
