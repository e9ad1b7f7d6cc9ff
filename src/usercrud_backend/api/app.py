"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from usercrud_backend.api.routers import users_router
from usercrud_backend.database import DatabaseService
from usercrud_backend.settings import BackendSettings, get_settings
from usercrud_backend.shared import StoreConnectionError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the schema on startup and release owned engines on shutdown."""
    database: DatabaseService = app.state.database
    if app.state.settings.create_tables:
        database.create_schema()
    yield
    if app.state.owns_database:
        logger.info("Disposing database engine")
        database.dispose()


async def _store_connection_handler(
    request: Request, exc: StoreConnectionError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Failed to connect to the database"},
    )


def create_api(
    settings: BackendSettings | None = None,
    *,
    database: DatabaseService | None = None,
) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    *database* is the store handle every request draws its session from.
    When omitted, one is built from *settings* and disposed of on shutdown.
    """
    config = settings or get_settings()
    app = FastAPI(title="User CRUD API", lifespan=_lifespan)
    app.state.settings = config
    app.state.owns_database = database is None
    app.state.database = database or DatabaseService(settings=config)

    app.add_exception_handler(StoreConnectionError, _store_connection_handler)
    app.include_router(users_router)
    return app
