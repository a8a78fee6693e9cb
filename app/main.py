"""FastAPI application entry point.

Startup runs strictly in order: load configuration, build the connection pool,
wait for the database, then build the application and bind the HTTP port.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from pydantic import ValidationError
from sqlalchemy.orm import sessionmaker

from app.api.routes import router
from app.core.config import Settings, get_settings, load_connection
from app.core.errors import ConfigurationError, DependencyUnavailableError
from app.db.session import create_db_engine, create_session_factory
from app.db.startup import wait_for_database

logger = logging.getLogger(__name__)

EXIT_CONFIGURATION = 2
EXIT_DEPENDENCY = 3


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format="%(asctime)s %(levelname)s %(message)s")


def create_app(session_factory: sessionmaker, title: str = "Hello Humans") -> FastAPI:
    """Build the application around an already validated session factory."""
    app = FastAPI(title=title)
    app.state.session_factory = session_factory
    app.include_router(router)
    return app


def load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid configuration: {exc}") from exc


def build_app(settings: Settings | None = None) -> FastAPI:
    """Run configuration and the startup gate, then return the application."""
    settings = settings or load_settings()
    connection = load_connection(settings)
    logger.info("Connecting to %r", connection)

    engine = create_db_engine(connection.url())
    try:
        wait_for_database(engine, settings.startup_timeout, settings.startup_interval)
    except DependencyUnavailableError:
        engine.dispose()
        raise
    return create_app(create_session_factory(engine), title=settings.project_name)


def main() -> int:
    """Run the service; returns the process exit code."""
    # Load environment variables from .env file
    load_dotenv()
    try:
        settings = load_settings()
        configure_logging(settings.log_level)
        app = build_app(settings)
    except ConfigurationError as exc:
        configure_logging()
        logger.error("Configuration error: %s", exc)
        return EXIT_CONFIGURATION
    except DependencyUnavailableError as exc:
        logger.error("Startup aborted: %s", exc)
        return EXIT_DEPENDENCY

    uvicorn.run(app, host=settings.http_host, port=settings.http_port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
