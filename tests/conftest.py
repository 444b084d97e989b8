import os
from datetime import datetime

# configure the app before it is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from energy_harmony.core.database import Base, get_db
from energy_harmony.main import app
from energy_harmony.models.usage import Usage


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(bind=db_engine, autoflush=False, autocommit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    """Registers a user and returns its id together with bearer headers."""
    counter = {"n": 0}

    def _make_user(name: str = "Test User") -> dict:
        counter["n"] += 1
        response = client.post(
            "/api/auth/register",
            json={
                "name": name,
                "email": f"user{counter['n']}@example.com",
                "password": "secret123",
            },
        )
        assert response.status_code == 201
        body = response.json()
        return {
            "id": body["user"]["id"],
            "headers": {"Authorization": f"Bearer {body['token']}"},
        }

    return _make_user


@pytest.fixture
def auth_headers(make_user):
    return make_user()["headers"]


@pytest.fixture
def add_usage(db_session):
    def _add_usage(user_id: int, timestamp: datetime, amount: float, device_id=None) -> Usage:
        sample = Usage(user_id=user_id, device_id=device_id, timestamp=timestamp, usage=amount)
        db_session.add(sample)
        db_session.commit()
        return sample

    return _add_usage


def frozen_datetime(now: datetime):
    """A datetime subclass whose utcnow() always returns `now`."""

    class FrozenDateTime(datetime):
        @classmethod
        def utcnow(cls):
            return now

    return FrozenDateTime


@pytest.fixture
def freeze_utcnow(monkeypatch):
    """Pins datetime.utcnow() inside the given modules."""

    def _freeze(now: datetime, *modules):
        frozen = frozen_datetime(now)
        for module in modules:
            monkeypatch.setattr(module, "datetime", frozen)

    return _freeze
