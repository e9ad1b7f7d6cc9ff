"""Repositories issuing statements against the database."""

from usercrud_backend.database.repositories.user import UserRepository

__all__ = ["UserRepository"]
