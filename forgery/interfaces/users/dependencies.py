"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that hand the application's
user store to use cases via constructor injection. The store itself
is created by create_app() and kept on ``app.state``.
"""

from fastapi import Depends, Request

from forgery.application.users.create_user import CreateUserUseCase
from forgery.application.users.login import LoginUseCase
from forgery.application.users.lookup_user import LookupUserUseCase
from forgery.domain.users.ports import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the user store owned by the running application."""
    return request.app.state.user_store


def get_create_user_use_case(
    user_store: UserStore = Depends(get_user_store),
) -> CreateUserUseCase:
    """Build CreateUserUseCase with the application's user store."""
    return CreateUserUseCase(user_store=user_store)


def get_lookup_user_use_case(
    user_store: UserStore = Depends(get_user_store),
) -> LookupUserUseCase:
    """Build LookupUserUseCase with the application's user store."""
    return LookupUserUseCase(user_store=user_store)


def get_login_use_case() -> LoginUseCase:
    return LoginUseCase()
