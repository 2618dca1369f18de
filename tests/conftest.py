"""Shared fixtures: in-memory SQLite per test, app client with get_db overridden."""

import os

# Settings are read at import time; keep tests off real secrets and files
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789-abcdefghijklmnop")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import Base, get_db
from main import app
from models.translation import ClipboardTranslation  # noqa: F401
from routers.auth import security
from schemas.auth import CurrentUser


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def alice() -> CurrentUser:
    return CurrentUser(id="user-alice")


@pytest.fixture
def bob() -> CurrentUser:
    return CurrentUser(id="user-bob")


@pytest.fixture
def auth_headers():
    """Build Authorization headers carrying an access token for a user id."""

    def _headers(user_id: str) -> dict[str, str]:
        token = security.create_access_token(uid=user_id)
        return {"Authorization": f"Bearer {token}"}

    return _headers
