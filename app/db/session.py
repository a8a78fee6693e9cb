"""Engine and per-request session helpers."""

from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import Session, sessionmaker


def create_db_engine(url: URL | str, **kwargs) -> Engine:
    """Create the pooled engine shared by all request handlers."""
    kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False)


def get_db(request: Request) -> Iterator[Session]:
    """Yield a session from the factory the application was built with."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
