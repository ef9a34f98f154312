"""
FastAPI routers for the users bounded context.

All routes delegate to use cases, run in a worker thread through
run_blocking so the request timeout can cut them off. No business
logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Response, status

from forgery.application.users.create_user import CreateUserUseCase
from forgery.application.users.dtos import CreateUserCommand, LookupUserQuery
from forgery.application.users.login import LoginUseCase
from forgery.application.users.lookup_user import LookupUserUseCase
from forgery.interfaces.hooks import run_request_hooks
from forgery.interfaces.users.dependencies import (
    get_create_user_use_case,
    get_login_use_case,
    get_lookup_user_use_case,
)
from forgery.interfaces.users.schemas import (
    CreateUserRequest,
    CreateUserResponse,
    ErrorResponse,
    UserResponse,
)
from forgery.shared.concurrency import run_blocking

router = APIRouter(
    prefix="/users",
    tags=["users"],
    dependencies=[Depends(run_request_hooks)],
)

login_router = APIRouter(tags=["login"], dependencies=[Depends(run_request_hooks)])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateUserResponse,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create a user",
    description="Create a user account if the username is not taken.",
)
async def create_user(
    request: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> CreateUserResponse:
    """Create a user and return its generated identifier."""
    command = CreateUserCommand(username=request.username, password=request.password)
    result = await run_blocking(use_case.execute, command)
    return CreateUserResponse(user_guid=result.user_guid)


@router.get(
    "/{user_guid}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Look up a user",
    description="Return the identifier and username of a user.",
)
async def lookup_user(
    user_guid: str,
    use_case: LookupUserUseCase = Depends(get_lookup_user_use_case),
) -> UserResponse:
    """Look up a user by identifier."""
    result = await run_blocking(use_case.execute, LookupUserQuery(user_guid=user_guid))
    return UserResponse(user_guid=result.user_guid, username=result.username)


@login_router.post(
    "/login",
    summary="Log in",
    description="Accepts every request and returns an empty 200 response.",
)
async def login(use_case: LoginUseCase = Depends(get_login_use_case)) -> Response:
    await run_blocking(use_case.execute)
    return Response(status_code=status.HTTP_200_OK)
