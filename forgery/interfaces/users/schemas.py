"""
Pydantic schemas for users API request/response validation.

These schemas define the API contract for the users endpoints.
No business logic belongs here.
"""

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """Request schema for the create-user endpoint.

    Attributes:
        username: Requested login name.
        password: Password for the new account. Never echoed back.
    """

    username: str = Field(..., description="Login name, unique among users")
    password: str = Field(..., description="Account password")


class CreateUserResponse(BaseModel):
    """Response schema for the create-user endpoint."""

    user_guid: str


class UserResponse(BaseModel):
    """Public view of a user returned by the lookup endpoint."""

    user_guid: str
    username: str


class ErrorResponse(BaseModel):
    """Error envelope returned by all error handlers."""

    code: str
    internal_code: str
    message: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
