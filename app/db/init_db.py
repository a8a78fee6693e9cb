"""Database initialization utilities."""

from sqlalchemy.engine import Engine

from app import models  # noqa: F401
from app.db.base import Base


def init_db(engine: Engine) -> None:
    """Create the tables backing the ORM models."""
    Base.metadata.create_all(bind=engine)
