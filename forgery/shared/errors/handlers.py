"""
Centralized error handlers for FastAPI.

Maps domain errors, framework errors and unexpected exceptions to the
JSON error envelope. Each domain error type has exactly one catalog
entry and HTTP status. No stack traces are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from forgery.domain.users.errors import (
    UserCreateFailedError,
    UserDomainError,
    UserLookupFailedError,
    UsernameAlreadyExistsError,
    UserNotFoundError,
    UserWriteFailedError,
)
from forgery.shared.errors import catalog
from forgery.shared.errors.envelope import (
    ErrorWithCodes,
    FrameworkError,
    render_error,
)
from forgery.shared.security.headers import SECURE_HEADERS

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_429 = 429
HTTP_500 = 500

DOMAIN_ERROR_TABLE: dict[type[UserDomainError], tuple[int, catalog.ErrorEntry]] = {
    UsernameAlreadyExistsError: (HTTP_409, catalog.USERS_CREATE_ALREADY_EXISTS),
    UserNotFoundError: (HTTP_404, catalog.USERS_LOOKUP_NOT_FOUND),
    UserCreateFailedError: (HTTP_500, catalog.USERS_CREATE_DB_FAILURE),
    UserWriteFailedError: (HTTP_500, catalog.USERS_CREATE_WRITE_FAILURE),
    UserLookupFailedError: (HTTP_500, catalog.USERS_LOOKUP_DB_FAILURE),
}


def error_response(status_code: int, error: Exception) -> Response:
    """Build an error response through the envelope renderer."""
    status_code, body = render_error(status_code, error)
    return Response(
        content=body,
        status_code=status_code,
        media_type="application/json" if body else None,
    )


def to_error_with_codes(exc: UserDomainError) -> tuple[int, ErrorWithCodes]:
    """Translate a domain error into its status and tagged error.

    Domain errors missing from DOMAIN_ERROR_TABLE fall back to the
    UNMAPPED_DOMAIN_ERROR entry with status 500.
    """
    for error_type in type(exc).__mro__:
        if error_type in DOMAIN_ERROR_TABLE:
            status_code, entry = DOMAIN_ERROR_TABLE[error_type]
            return status_code, ErrorWithCodes(entry)
    return HTTP_500, ErrorWithCodes(catalog.UNMAPPED_DOMAIN_ERROR)


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> Response:
    """Handle rate limit rejections as framework errors."""
    logger.warning("Rate limit exceeded: %s", exc.detail)
    return error_response(HTTP_429, FrameworkError(HTTP_429, str(exc.detail)))


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(UserDomainError)
    async def handle_user_domain(_request: Request, exc: UserDomainError) -> Response:
        """Handle users domain errors via the domain error table."""
        status_code, tagged = to_error_with_codes(exc)
        if status_code >= HTTP_500:
            logger.error("%s [%s]", exc.message, tagged.internal_code)
        else:
            logger.warning("%s [%s]", exc.message, tagged.internal_code)
        return error_response(status_code, tagged)

    @app.exception_handler(FrameworkError)
    async def handle_framework(_request: Request, exc: FrameworkError) -> Response:
        """Handle framework errors raised from request hooks."""
        logger.warning("Framework error %d: %s", exc.status_code, exc)
        return error_response(exc.status_code, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> Response:
        """Handle invalid request bodies and parameters."""
        logger.warning("Bad request on %s: %d errors", request.url.path, len(exc.errors()))
        return error_response(HTTP_400, FrameworkError(HTTP_400, "request validation failed"))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(_request: Request, exc: StarletteHTTPException) -> Response:
        """Handle routing errors such as unknown paths and wrong methods."""
        logger.warning("HTTP error %d: %s", exc.status_code, exc.detail)
        return error_response(exc.status_code, FrameworkError(exc.status_code, str(exc.detail)))

    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> Response:
        """Catch-all for errors not tagged with a catalog entry.

        Starlette runs this handler outside the middleware stack, so the
        security headers are set here.
        """
        logger.exception("Unexpected error: %s", type(exc).__name__)
        response = error_response(HTTP_500, exc)
        response.headers.update(SECURE_HEADERS)
        return response
