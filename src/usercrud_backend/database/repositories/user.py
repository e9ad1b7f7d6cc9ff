"""Repository helpers for working with users."""

from __future__ import annotations

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import Executable

from usercrud_backend.database.schemas import UserSchema
from usercrud_backend.shared import StoreError, User, UserNotFoundError


class UserRepository:
    """Encapsulates the CRUD statements for the ``users`` table.

    Every statement is built from SQLAlchemy Core constructs so values are
    always sent as bound parameters. Writes are committed one statement at a
    time.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_users(self) -> list[User]:
        """Return every stored user, or an empty list when there are none."""
        stmt = select(UserSchema.id, UserSchema.name, UserSchema.email)
        try:
            rows = self._session.execute(stmt).all()
        except SQLAlchemyError as exc:
            self._session.rollback()
            msg = "failed to list users"
            raise StoreError(msg) from exc
        return [User(id=row.id, name=row.name, email=row.email) for row in rows]

    def create_user(self, name: str, email: str) -> None:
        """Insert a new user; the store assigns its id."""
        stmt = insert(UserSchema).values(name=name, email=email)
        self._execute(stmt, "failed to create user")

    def get_user(self, user_id: int) -> User:
        """Return the user with *user_id* or raise :class:`UserNotFoundError`."""
        stmt = select(UserSchema.id, UserSchema.name, UserSchema.email).where(
            UserSchema.id == user_id
        )
        try:
            row = self._session.execute(stmt).first()
        except SQLAlchemyError as exc:
            self._session.rollback()
            msg = f"failed to load user {user_id}"
            raise StoreError(msg) from exc
        if row is None:
            raise UserNotFoundError(user_id)
        return User(id=row.id, name=row.name, email=row.email)

    def update_user(self, user_id: int, name: str, email: str) -> None:
        """Overwrite name and email of *user_id*.

        Matching zero rows is not an error.
        """
        stmt = (
            update(UserSchema)
            .where(UserSchema.id == user_id)
            .values(name=name, email=email)
        )
        self._execute(stmt, f"failed to update user {user_id}")

    def delete_user(self, user_id: int) -> None:
        """Delete *user_id*; matching zero rows is not an error."""
        stmt = delete(UserSchema).where(UserSchema.id == user_id)
        self._execute(stmt, f"failed to delete user {user_id}")

    def _execute(self, stmt: Executable, message: str) -> None:
        try:
            self._session.execute(stmt)
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise StoreError(message) from exc
