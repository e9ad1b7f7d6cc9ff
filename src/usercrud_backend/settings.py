"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class BackendSettings(BaseSettings):
    """Centralized settings for the user CRUD backend service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    db_driver: str = "postgresql+psycopg"
    db_user: str = "root"
    db_password: str = "root"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "gocrud_app"
    database_url: str | None = None

    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"
    create_tables: bool = True

    @property
    def database_dsn(self) -> str:
        """Return ``database_url`` or a URL assembled from the ``db_*`` fields."""
        if self.database_url:
            return self.database_url
        url = URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)


@cache
def get_settings() -> BackendSettings:
    """Return the cached settings instance."""

    return BackendSettings()


__all__ = ["BackendSettings", "get_settings"]
