"""Dependency providers for FastAPI routers."""

from __future__ import annotations

import re

from fastapi import Depends, HTTPException, Request, status
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from usercrud_backend.api.models import UserPayload
from usercrud_backend.api.services import UserService
from usercrud_backend.database import UserRepository, get_session
from usercrud_backend.shared import User

_USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_MAX_USER_ID = 2**63 - 1
_MIN_USER_ID = -(2**63)

USER_PAYLOAD_ADAPTER = TypeAdapter(UserPayload | None)


def parse_user_id(user_id: str) -> int:
    """Parse the ``{user_id}`` path segment as a signed 64-bit integer.

    Declared ahead of the session dependency in every route so that a bad id
    is rejected before the store is touched.
    """

    if _USER_ID_PATTERN.fullmatch(user_id) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user ID"
        )
    value = int(user_id)
    if not _MIN_USER_ID <= value <= _MAX_USER_ID:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user ID"
        )
    return value


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    """Return a :class:`UserService` bound to the request's session."""

    return UserService(UserRepository(session))


async def read_user_payload(request: Request) -> User:
    """Decode the request body as JSON regardless of its ``Content-Type``.

    A ``null`` document decodes to a user with empty fields, leaving the
    missing-field report to :meth:`User.validate`.
    """

    raw = await request.body()
    try:
        payload = USER_PAYLOAD_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid input"
        ) from exc
    return (payload or UserPayload()).to_user()


__all__ = ["get_user_service", "parse_user_id", "read_user_payload"]
