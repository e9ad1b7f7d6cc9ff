"""User management logic sitting between the routers and the repository."""

from __future__ import annotations

import logging

from usercrud_backend.database import UserRepository
from usercrud_backend.shared import User

logger = logging.getLogger(__name__)


class UserService:
    """Validates user data and delegates persistence to :class:`UserRepository`."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def list_users(self) -> list[User]:
        return self._repository.list_users()

    def create_user(self, user: User) -> None:
        """Validate *user* and insert it.

        Raises :class:`UserValidationError` before touching the store when
        the data is invalid.
        """
        user.validate()
        logger.debug("Creating user with email %s", user.email)
        self._repository.create_user(user.name, user.email)

    def get_user(self, user_id: int) -> User:
        return self._repository.get_user(user_id)

    def update_user(self, user_id: int, user: User) -> None:
        """Validate *user* and store its fields under *user_id*.

        Succeeds even when *user_id* does not exist.
        """
        user.validate()
        logger.debug("Updating user %d", user_id)
        self._repository.update_user(user_id, user.name, user.email)

    def delete_user(self, user_id: int) -> None:
        logger.debug("Deleting user %d", user_id)
        self._repository.delete_user(user_id)


__all__ = ["UserService"]
