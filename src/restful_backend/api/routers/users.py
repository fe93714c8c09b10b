"""User resource endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Request, Response, status

from restful_backend.api.dependencies import get_user_controller
from restful_backend.api.models import (
    ErrorResponse,
    UserCreateRequest,
    UserInfo,
    UserInfoCollection,
    UserRenameRequest,
    UserResponse,
)
from restful_backend.api.services import UserController

router = APIRouter(prefix="/users", tags=["User"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "User not found"}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid payload"}}


def _location(request: Request, user_id: int) -> str:
    """Absolute URI of a created user, derived from the current request URI."""

    base = str(request.url.replace(query="", fragment="")).rstrip("/")
    return f"{base}/{user_id}"


@router.get(
    "",
    response_model=UserInfoCollection,
    summary="Get all users",
    description="Fetch all users",
)
def list_all_users(
    controller: UserController = Depends(get_user_controller),
) -> UserInfoCollection:
    return controller.list_all_users()


@router.get(
    "/{user_id}",
    response_model=UserInfo,
    summary="Get a user",
    responses=_NOT_FOUND,
)
def retrieve_user_by_id(
    user_id: int,
    controller: UserController = Depends(get_user_controller),
) -> UserInfo:
    return controller.retrieve_user_by_id(user_id)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses=_BAD_REQUEST,
)
def create_user(
    payload: UserCreateRequest,
    request: Request,
    response: Response,
    controller: UserController = Depends(get_user_controller),
) -> UserResponse:
    """Store a new user and point ``Location`` at it."""

    user = controller.create_user(payload)
    response.headers["Location"] = _location(request, user.id)
    return user


@router.delete(
    "/{user_id}",
    response_model=UserResponse,
    summary="Delete a user",
    responses=_NOT_FOUND,
)
def delete_user(
    user_id: int,
    controller: UserController = Depends(get_user_controller),
) -> UserResponse:
    return controller.delete_user(user_id)


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    summary="Rename a user",
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def update_user(
    user_id: int,
    payload: UserRenameRequest | None = Body(default=None),
    controller: UserController = Depends(get_user_controller),
) -> UserResponse:
    return controller.update_user(user_id, payload)
