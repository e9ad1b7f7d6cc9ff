"""Pydantic models for the user endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from usercrud_backend.shared import User


class UserPayload(BaseModel):
    """Body accepted by the create and update endpoints.

    Absent or ``null`` fields decode to empty strings so that
    :meth:`User.validate` reports them as missing. Unknown keys, including
    ``id``, are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None

    def to_user(self) -> User:
        """Convert payload into an unsaved :class:`User`."""
        return User(name=self.name or "", email=self.email or "")


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
