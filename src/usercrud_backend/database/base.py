"""Declarative base for SQLAlchemy models."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {"pk": "pk_%(table_name)s"}


class BaseSchema(DeclarativeBase):
    """Base class for all SQLAlchemy schemas."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
