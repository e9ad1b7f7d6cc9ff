"""User CRUD API entrypoint."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from usercrud_backend.api import create_api
from usercrud_backend.settings import get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def create_app() -> FastAPI:
    """Build the application from environment settings."""
    return create_api(get_settings())


def _run_uvicorn(*, reload: bool) -> None:
    """Start uvicorn with a consistent configuration."""
    config = get_settings()
    logging.basicConfig(level=config.log_level.upper(), format=LOG_FORMAT)
    logger.info("Server listening on %s:%d", config.api_host, config.api_port)
    uvicorn.run(
        "usercrud_backend.main:create_app",
        factory=True,
        host=config.api_host,
        port=config.api_port,
        reload=reload,
        log_level=config.log_level.lower(),
    )


def run_dev() -> None:
    """Run the development ASGI server with auto-reload."""
    _run_uvicorn(reload=True)


def run_prod() -> None:
    """Run the production ASGI server without auto-reload."""
    _run_uvicorn(reload=False)
