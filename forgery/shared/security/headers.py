"""
Secure HTTP headers middleware.

Adds security-related headers to every response that passes through
the middleware stack. Responses to unhandled exceptions are built
outside it, so the catch-all error handler sets the same headers.
Responses carry account data, so caching is disabled too.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'",
    "X-XSS-Protection": "1; mode=block",
    "Cache-Control": "no-store",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that sets a fixed group of headers on every response.

    Args:
        app: The wrapped ASGI application.
        headers: Headers to set. Defaults to SECURE_HEADERS.
    """

    def __init__(self, app: ASGIApp, headers: dict[str, str] | None = None) -> None:
        super().__init__(app)
        self._headers = dict(SECURE_HEADERS if headers is None else headers)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in self._headers.items():
            response.headers[header_name] = header_value
        return response
