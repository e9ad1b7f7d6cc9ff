"""Database session management utilities."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from usercrud_backend.database.base import BaseSchema
from usercrud_backend.settings import BackendSettings, get_settings
from usercrud_backend.shared import StoreConnectionError

logger = logging.getLogger(__name__)


class DatabaseService:
    """Wraps SQLAlchemy engine and session factory."""

    def __init__(
        self,
        url: str | None = None,
        *,
        settings: BackendSettings | None = None,
        **engine_options: Any,
    ) -> None:
        if url is None:
            url = (settings or get_settings()).database_dsn
        self._engine = create_engine(url, **engine_options)
        self._session_factory = sessionmaker(
            bind=self._engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            class_=Session,
        )

    @property
    def engine(self) -> Engine:
        """Expose the SQLAlchemy engine."""

        return self._engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a session bound to a freshly acquired connection.

        Raises :class:`StoreConnectionError` when no connection can be
        acquired. The session is closed on every exit path.
        """

        session = self._session_factory()
        try:
            session.connection()
        except SQLAlchemyError as exc:
            session.close()
            msg = "failed to connect to the database"
            raise StoreConnectionError(msg) from exc

        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_schema(self) -> None:
        """Create the tables declared on :class:`BaseSchema` if missing."""

        logger.info("Ensuring database schema exists")
        BaseSchema.metadata.create_all(bind=self._engine)

    def dispose(self) -> None:
        """Release pooled connections held by the engine."""

        self._engine.dispose()
