"""Database connectivity helpers and repositories."""

from usercrud_backend.database.base import BaseSchema
from usercrud_backend.database.dependencies import get_database, get_session
from usercrud_backend.database.repositories import UserRepository
from usercrud_backend.database.schemas import UserSchema
from usercrud_backend.database.service import DatabaseService

__all__ = [
    "BaseSchema",
    "DatabaseService",
    "UserRepository",
    "UserSchema",
    "get_database",
    "get_session",
]
