"""
Error catalog.

Static tables of public error codes, internal diagnostic codes and
client-facing messages. Internal codes identify the exact failure site
for log correlation and are never reused for a different condition.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(str, Enum):
    """Public error codes returned to clients."""

    INTERNAL_SERVICE_ERROR = "INTERNAL_SERVICE_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    USERNAME_ALREADY_EXISTS = "USERNAME_ALREADY_EXISTS"


class InternalCode:
    """Internal diagnostic codes, one per failure site."""

    ERROR_MARSHAL_FAILURE = "FORGERY-0000"
    FRAMEWORK_ERROR = "FORGERY-0001"
    BAD_REQUEST = "FORGERY-0002"
    USERS_CREATE_DB_FAILURE = "FORGERY-0003"
    USERS_LOOKUP_NOT_FOUND = "FORGERY-0004"
    USERS_CREATE_ALREADY_EXISTS = "FORGERY-0005"
    USERS_LOOKUP_DB_FAILURE = "FORGERY-0006"
    USERS_CREATE_WRITE_FAILURE = "FORGERY-0007"
    UNHANDLED_ERROR = "FORGERY-0008"
    UNMAPPED_DOMAIN_ERROR = "FORGERY-0009"


class ErrorMessage:
    """Client-facing messages."""

    INTERNAL_SERVER_ERROR = "internal server error"
    BAD_REQUEST = "bad request"
    USER_NOT_FOUND = "user not found"
    USERNAME_EXISTS = "username already taken"


@dataclass(frozen=True)
class ErrorEntry:
    """A (public code, internal code, message) triple."""

    code: ErrorCode
    internal_code: str
    message: str


def internal_server_error(internal_code: str) -> ErrorEntry:
    """Build the generic internal-service-error entry for a failure site."""
    return ErrorEntry(
        ErrorCode.INTERNAL_SERVICE_ERROR,
        internal_code,
        ErrorMessage.INTERNAL_SERVER_ERROR,
    )


FRAMEWORK_ERROR = internal_server_error(InternalCode.FRAMEWORK_ERROR)
BAD_REQUEST = ErrorEntry(
    ErrorCode.BAD_REQUEST, InternalCode.BAD_REQUEST, ErrorMessage.BAD_REQUEST
)
USERS_CREATE_DB_FAILURE = internal_server_error(InternalCode.USERS_CREATE_DB_FAILURE)
USERS_CREATE_WRITE_FAILURE = internal_server_error(
    InternalCode.USERS_CREATE_WRITE_FAILURE
)
USERS_CREATE_ALREADY_EXISTS = ErrorEntry(
    ErrorCode.USERNAME_ALREADY_EXISTS,
    InternalCode.USERS_CREATE_ALREADY_EXISTS,
    ErrorMessage.USERNAME_EXISTS,
)
USERS_LOOKUP_NOT_FOUND = ErrorEntry(
    ErrorCode.USER_NOT_FOUND,
    InternalCode.USERS_LOOKUP_NOT_FOUND,
    ErrorMessage.USER_NOT_FOUND,
)
USERS_LOOKUP_DB_FAILURE = internal_server_error(InternalCode.USERS_LOOKUP_DB_FAILURE)
UNMAPPED_DOMAIN_ERROR = internal_server_error(InternalCode.UNMAPPED_DOMAIN_ERROR)
