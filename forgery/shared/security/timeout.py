"""
Request timeout middleware.

Bounds the time spent handling each HTTP request. A request that runs
past the limit before its response has started is answered with 408
and an empty body.
"""

import asyncio
import logging

from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from forgery.shared.errors.envelope import RequestTimeoutError, render_error

logger = logging.getLogger(__name__)

HTTP_408 = 408


class RequestTimeoutMiddleware:
    """Pure ASGI middleware cancelling requests that exceed ``timeout`` seconds."""

    def __init__(self, app: ASGIApp, timeout: float) -> None:
        self.app = app
        self.timeout = timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(self.app(scope, receive, send_wrapper), self.timeout)
        except asyncio.TimeoutError:
            if response_started:
                raise
            logger.warning(
                "Request %s %s timed out after %.1fs",
                scope.get("method"),
                scope.get("path"),
                self.timeout,
            )
            status_code, body = render_error(HTTP_408, RequestTimeoutError(HTTP_408))
            await Response(content=body, status_code=status_code)(scope, receive, send)
