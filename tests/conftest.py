import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.core.config import get_settings
from app.db.init_db import init_db
from app.db.session import create_session_factory
from app.main import create_app
from app.models.human import Human

DB_ENV = (
    "DB_DATABASE",
    "DB_USER",
    "DB_PASSWORD_FILE",
    "DB_STARTUP_TIMEOUT",
    "DB_STARTUP_INTERVAL",
    "PROJECT_NAME",
    "LOG_LEVEL",
    "HOST",
    "PORT",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in DB_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("app.main.load_dotenv", lambda *args, **kwargs: False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_engine(*names):
    """In-memory database with the schema and one row per name (ids start at 1)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    with create_session_factory(engine)() as db:
        db.add_all([Human(name=name) for name in names])
        db.commit()
    return engine


@pytest.fixture
def engine():
    engine = make_engine("Linus", "Ada", None)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def client(session_factory):
    with TestClient(create_app(session_factory)) as client:
        yield client


@pytest.fixture
def db_env(monkeypatch, tmp_path):
    password_file = tmp_path / "pw"
    password_file.write_text("s3cret", encoding="utf-8")
    monkeypatch.setenv("DB_DATABASE", "app")
    monkeypatch.setenv("DB_USER", "app")
    monkeypatch.setenv("DB_PASSWORD_FILE", str(password_file))
    return password_file


@pytest.fixture
def engine_factory():
    return make_engine
