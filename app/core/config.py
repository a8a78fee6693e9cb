"""Application configuration."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os
from pathlib import Path

from pydantic import BaseModel, Field
from sqlalchemy.engine import URL

from app.core.errors import ConfigurationError

DB_DRIVER = "mariadb+pymysql"


def _env(name: str, default: str | None = None):
    return Field(default_factory=lambda: os.getenv(name, default))


class Settings(BaseModel):
    """Application settings (env 값이 있으면 사용, 없으면 기본값)."""

    project_name: str = _env("PROJECT_NAME", "Hello Humans")

    # host/port are fixed by the deployment (compose service "db")
    db_host: str = "db"
    db_port: int = 3306
    db_database: str | None = _env("DB_DATABASE")
    db_user: str | None = _env("DB_USER")
    db_password_file: str | None = _env("DB_PASSWORD_FILE")

    startup_timeout: float = _env("DB_STARTUP_TIMEOUT", "60")
    startup_interval: float = _env("DB_STARTUP_INTERVAL", "1")

    log_level: str = _env("LOG_LEVEL", "INFO")
    http_host: str = _env("HOST", "0.0.0.0")
    http_port: int = _env("PORT", "8080")

    model_config = {"validate_default": True}


@dataclass(frozen=True)
class ConnectionDescriptor:
    """Everything needed to open a database connection."""

    host: str
    port: int
    database: str
    username: str
    password: str = ""

    def url(self) -> URL:
        return URL.create(
            DB_DRIVER,
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        )

    def __repr__(self) -> str:
        return f"ConnectionDescriptor({self.url().render_as_string(hide_password=True)})"


def read_password(path: str) -> str:
    """Read the database password exactly as stored in the file."""
    try:
        with Path(path).open(encoding="utf-8", newline="") as fp:
            return fp.read()
    except OSError as exc:
        raise ConfigurationError(f"cannot read password file {path!r}: {exc}") from exc


def load_connection(settings: Settings) -> ConnectionDescriptor:
    """Assemble the connection descriptor, reading the password file once."""
    missing = [
        env
        for env, value in (
            ("DB_DATABASE", settings.db_database),
            ("DB_USER", settings.db_user),
            ("DB_PASSWORD_FILE", settings.db_password_file),
        )
        if not value
    ]
    if missing:
        raise ConfigurationError(f"missing environment variables: {', '.join(missing)}")

    return ConnectionDescriptor(
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_database,
        username=settings.db_user,
        password=read_password(settings.db_password_file),
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
