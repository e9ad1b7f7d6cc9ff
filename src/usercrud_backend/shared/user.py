"""User entity and its validation rules."""

from __future__ import annotations

import re
from dataclasses import dataclass

from usercrud_backend.shared.errors import InvalidFormatError, MissingFieldError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def is_valid_email(email: str) -> bool:
    """Return True when *email* matches :data:`EMAIL_PATTERN` as a whole."""
    # fullmatch keeps "$" from accepting a trailing newline
    return EMAIL_PATTERN.fullmatch(email) is not None


@dataclass(slots=True)
class User:
    """A row of the ``users`` table.

    ``id`` is assigned by the store and stays ``0`` for users that have not
    been persisted yet.
    """

    name: str
    email: str
    id: int = 0

    def validate(self) -> None:
        """Raise a :class:`UserValidationError` subclass for invalid data.

        Checks run in order (name, email presence, email format) and the
        first failure is reported.
        """
        if self.name == "":
            raise MissingFieldError("name")
        if self.email == "":
            raise MissingFieldError("email")
        if not is_valid_email(self.email):
            raise InvalidFormatError("email")
