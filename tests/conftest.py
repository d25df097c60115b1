import os

# Must be set before edumigrate.config is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from edumigrate.config import settings
from edumigrate.database import get_db
from edumigrate.main import app
from edumigrate.models import Base, Universities


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


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
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    client.cookies.set(settings.auth_cookie_name, "test-session")
    return client


@pytest.fixture
def add_university(db):
    """Insert a university row directly, bypassing the admin API."""

    def _add(**fields):
        fields.setdefault("status", "published")
        obj = Universities(**fields)
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    return _add
