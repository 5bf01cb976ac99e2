"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from todo_app.main import app
from todo_app.db.session import Base, build_engine, get_db
from todo_app.client.api import TodoApiClient


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database shared by every connection."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(db_session_factory):
    session = db_session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session_factory):
    """Test client wired to the in-memory database."""
    def override_get_db():
        session = db_session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def api(client):
    """API client talking to the app through the test client."""
    return TodoApiClient(base_url="http://testserver", session=client)


@pytest.fixture
def fake_api():
    from tests.fakes import FakeApi
    return FakeApi()
