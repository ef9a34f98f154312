"""
Error envelope rendering.

Every error response body has the shape
``{"code": ..., "internal_code": ..., "message": ...}``.
render_error() is the single place that turns an exception into that
body. It is pure and deterministic: the same error always yields the
same bytes.
"""

import json
import logging

from forgery.shared.errors.catalog import (
    BAD_REQUEST,
    FRAMEWORK_ERROR,
    ErrorCode,
    ErrorEntry,
    InternalCode,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500

# Must stay a literal: it is returned when rendering itself fails.
FALLBACK_BODY = (
    b'{"code":"INTERNAL_SERVICE_ERROR",'
    b'"internal_code":"FORGERY-0000",'
    b'"message":"internal server error"}'
)


class ErrorWithCodes(Exception):
    """An error tagged with a catalog entry. Safe to show to clients."""

    def __init__(self, entry: ErrorEntry) -> None:
        super().__init__(entry.message)
        self.entry = entry

    @property
    def internal_code(self) -> str:
        return self.entry.internal_code


class FrameworkError(Exception):
    """An error raised by the web framework rather than by application code.

    Covers body/parameter validation, unknown routes, rate limiting
    and rejected request hooks.
    """

    def __init__(self, status_code: int, detail: str = "") -> None:
        super().__init__(detail or f"framework error {status_code}")
        self.status_code = status_code
        self.detail = detail


class RequestTimeoutError(FrameworkError):
    """The request did not complete within the configured timeout."""


def _to_bytes(code: str, internal_code: str, message: str) -> bytes:
    body = {"code": code, "internal_code": internal_code, "message": message}
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def _entry_bytes(entry: ErrorEntry) -> bytes:
    return _to_bytes(entry.code.value, entry.internal_code, entry.message)


def render_error(status_code: int, error: Exception) -> tuple[int, bytes]:
    """Render an error as an HTTP status and JSON body.

    Args:
        status_code: The status chosen for the failure.
        error: The exception being reported.

    Returns:
        The status to send and the encoded body. A timeout yields an
        empty body. If building the body fails for any reason, including
        an error whose text or internal code cannot be read, the status
        is forced to 500 and FALLBACK_BODY is returned.
    """
    try:
        if isinstance(error, RequestTimeoutError):
            return status_code, b""
        if isinstance(error, FrameworkError):
            entry = BAD_REQUEST if status_code == HTTP_400 else FRAMEWORK_ERROR
            return status_code, _entry_bytes(entry)
        if isinstance(error, ErrorWithCodes):
            return status_code, _entry_bytes(error.entry)
        # Anything not tagged with a catalog entry.
        internal_code = getattr(error, "internal_code", InternalCode.UNHANDLED_ERROR)
        return status_code, _to_bytes(
            ErrorCode.INTERNAL_SERVICE_ERROR.value, internal_code, str(error)
        )
    except Exception:
        logger.exception("Failed to render error body for %s", type(error).__name__)
        return HTTP_500, FALLBACK_BODY
