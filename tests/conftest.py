"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from usercrud_backend.api import create_api
from usercrud_backend.database import DatabaseService
from usercrud_backend.settings import BackendSettings, get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.orm import Session


def make_database(*, create_schema: bool = True) -> DatabaseService:
    """Build a database service backed by a private in-memory SQLite store."""
    database = DatabaseService(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    if create_schema:
        database.create_schema()
    return database


@pytest.fixture(autouse=True)
def _mock_settings() -> Iterator[None]:
    """Ensure settings are reloaded for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def database() -> Iterator[DatabaseService]:
    database = make_database()
    yield database
    database.dispose()


@pytest.fixture
def session(database: DatabaseService) -> Iterator[Session]:
    with database.session() as session:
        yield session


@pytest.fixture
def client(database: DatabaseService) -> Iterator[TestClient]:
    app = create_api(BackendSettings(create_tables=True), database=database)
    with TestClient(app) as test_client:
        yield test_client
