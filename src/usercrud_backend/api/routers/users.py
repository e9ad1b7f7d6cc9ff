"""CRUD endpoints for users."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from usercrud_backend.api.dependencies import (
    get_user_service,
    parse_user_id,
    read_user_payload,
)
from usercrud_backend.api.models import UserResponse
from usercrud_backend.api.services import UserService
from usercrud_backend.shared import StoreError, User, UserValidationError

router = APIRouter(tags=["users"])


def _message(text: str, status_code: int = status.HTTP_200_OK) -> PlainTextResponse:
    return PlainTextResponse(f"{text}\n", status_code=status_code)


@router.get("/users", response_model=list[UserResponse])
def list_users(
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """Return every stored user."""

    try:
        users = service.list_users()
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        ) from exc
    return [UserResponse.model_validate(user) for user in users]


@router.post(
    "/user",
    response_class=PlainTextResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_user(
    service: UserService = Depends(get_user_service),
    user: User = Depends(read_user_payload),
) -> PlainTextResponse:
    """Validate the payload and insert a new user."""

    try:
        service.create_user(user)
    except UserValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user",
        ) from exc
    return _message("User created successfully", status.HTTP_201_CREATED)


@router.get("/user/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int = Depends(parse_user_id),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Return a single user; any store failure is reported as not found."""

    try:
        user = service.get_user(user_id)
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        ) from exc
    return UserResponse.model_validate(user)


@router.put("/user/{user_id}", response_class=PlainTextResponse)
def update_user(
    user_id: int = Depends(parse_user_id),
    service: UserService = Depends(get_user_service),
    user: User = Depends(read_user_payload),
) -> PlainTextResponse:
    """Replace name and email of a user.

    An id that matches no row still yields the success message.
    """

    try:
        service.update_user(user_id, user)
    except UserValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update user",
        ) from exc
    return _message("User updated successfully")


@router.delete("/user/{user_id}", response_class=PlainTextResponse)
def delete_user(
    user_id: int = Depends(parse_user_id),
    service: UserService = Depends(get_user_service),
) -> PlainTextResponse:
    """Delete a user; unknown ids are a silent no-op."""

    try:
        service.delete_user(user_id)
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete user",
        ) from exc
    return _message("User deleted successfully")
