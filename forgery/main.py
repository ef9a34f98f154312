"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (users, login, health)
- Request hooks (authentication, request validation)
- Error handlers (centralized domain-to-envelope mapping)
- Security middleware (headers, request timeout) and the rate limit dependency
- Logging configuration
- The user store owned by this application instance

No business logic belongs here.
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI

from forgery.core.config import Settings, settings as default_settings
from forgery.domain.users.ports import UserStore
from forgery.infrastructure.users.in_memory_user_store import InMemoryUserStore
from forgery.interfaces.health import router as health_router
from forgery.interfaces.hooks import (
    Authenticator,
    NoopAuthenticator,
    NoopRequestValidator,
    RequestValidator,
)
from forgery.interfaces.users.router import login_router, router as users_router
from forgery.shared.errors.handlers import register_error_handlers
from forgery.shared.logging import configure_logging
from forgery.shared.security.headers import SecurityHeadersMiddleware
from forgery.shared.security.rate_limiting import (
    build_limiter,
    enforce_rate_limit,
    install_rate_limiting,
)
from forgery.shared.security.timeout import RequestTimeoutMiddleware

logger = logging.getLogger(__name__)

API_PREFIX = "/v1"


def create_app(
    settings: Optional[Settings] = None,
    user_store: Optional[UserStore] = None,
    authenticator: Optional[Authenticator] = None,
    request_validator: Optional[RequestValidator] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. Each call builds
    a new app with its own user store and rate limiter.

    Args:
        settings: Configuration to use. Defaults to the environment settings.
        user_store: Store to serve from. Defaults to a new InMemoryUserStore.
        authenticator: Header check run before each route. Defaults to no-op.
        request_validator: Body check run before each route. Defaults to no-op.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level, access_log=settings.debug)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        dependencies=[Depends(enforce_rate_limit)],
    )

    # --- Resources ---
    app.state.user_store = user_store or InMemoryUserStore()
    app.state.authenticator = authenticator or NoopAuthenticator()
    app.state.request_validator = request_validator or NoopRequestValidator()

    # --- Rate Limiting ---
    install_rate_limiting(
        app,
        build_limiter(settings.rate_limit_default, enabled=settings.rate_limit_enabled),
    )

    # --- Security Middleware ---
    app.add_middleware(RequestTimeoutMiddleware, timeout=settings.request_timeout_seconds)
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(login_router, prefix=API_PREFIX)
    app.include_router(users_router, prefix=API_PREFIX)

    logger.debug("Application %s %s created", settings.project_name, settings.version)
    return app


app = create_app()
