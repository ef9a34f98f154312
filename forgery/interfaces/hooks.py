"""
Request hooks run before every versioned route.

Two pluggable checks, each returning ``(status_code, error)``:
- Authenticator: inspects request headers.
- RequestValidator: inspects the raw request body.

The permissive no-op variants are installed by default. A hook that
returns an error status or an error aborts the request with a
FrameworkError carrying that status.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Optional

from fastapi import Request

from forgery.shared.errors.envelope import FrameworkError

logger = logging.getLogger(__name__)

HTTP_200 = 200
HTTP_400 = 400
HTTP_500 = 500

HookResult = tuple[int, Optional[Exception]]


class Authenticator(ABC):
    """Decides whether a request may proceed based on its headers."""

    @abstractmethod
    def authenticate(self, headers: Mapping[str, str]) -> HookResult:
        raise NotImplementedError


class RequestValidator(ABC):
    """Decides whether a raw request body is acceptable."""

    @abstractmethod
    def validate(self, body: bytes) -> HookResult:
        raise NotImplementedError


class NoopAuthenticator(Authenticator):
    """Lets every request through."""

    def authenticate(self, headers: Mapping[str, str]) -> HookResult:
        return HTTP_200, None


class NoopRequestValidator(RequestValidator):
    """Accepts every body. Field validation is left to the Pydantic schemas."""

    def validate(self, body: bytes) -> HookResult:
        return HTTP_200, None


def _check(hook_name: str, result: HookResult) -> None:
    status_code, error = result
    if error is None and status_code < HTTP_400:
        return
    if status_code < HTTP_400:
        status_code = HTTP_500
    logger.warning("%s rejected request with status %d", hook_name, status_code)
    raise FrameworkError(status_code, str(error) if error else hook_name)


async def run_request_hooks(request: Request) -> None:
    """FastAPI dependency running the app's authenticator and request validator.

    Raises:
        FrameworkError: If either hook rejects the request.
    """
    authenticator: Authenticator = request.app.state.authenticator
    _check("authenticator", authenticator.authenticate(request.headers))

    request_validator: RequestValidator = request.app.state.request_validator
    _check("request validator", request_validator.validate(await request.body()))
