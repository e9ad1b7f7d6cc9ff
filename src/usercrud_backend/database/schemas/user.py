"""User database schema."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from usercrud_backend.database.base import BaseSchema


class UserSchema(BaseSchema):
    """SQLAlchemy model for the ``users`` table."""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
