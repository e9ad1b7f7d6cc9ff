"""Shared entities, validation rules and error types for the backend."""

from usercrud_backend.shared.errors import (
    InvalidFormatError,
    MissingFieldError,
    StoreConnectionError,
    StoreError,
    UserNotFoundError,
    UserValidationError,
)
from usercrud_backend.shared.user import EMAIL_PATTERN, User, is_valid_email

__all__ = [
    "EMAIL_PATTERN",
    "InvalidFormatError",
    "MissingFieldError",
    "StoreConnectionError",
    "StoreError",
    "User",
    "UserNotFoundError",
    "UserValidationError",
    "is_valid_email",
]
