"""Shared fixtures: in-memory SQLite database and a FastAPI test client."""

import os

# Must be set before catalog.core.config is first imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.api.dependencies.db import get_session
from catalog.db.base import Base
from catalog.db.models.product import Product  # noqa: F401
from catalog.main import app


@pytest.fixture
def engine():
    """Fresh in-memory database per test, shared across threads."""
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
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db_session(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def client(session_factory):
    """TestClient whose requests use the in-memory database."""

    def override_get_session():
        db = session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    app.dependency_overrides[get_session] = override_get_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def pencil_payload():
    return {
        "title": "Pencil set",
        "description": "Box of 12 pencils",
        "price": 7.5,
    }
