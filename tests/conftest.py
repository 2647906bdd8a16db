"""Shared fixtures: in-memory database, pinned clock, signed tokens."""

import uuid
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from app import models  # noqa: F401
from app.core.clock import Clock, get_clock
from app.core.config import Base, Settings, build_engine, build_session_factory
from app.core.security import create_access_token
from main import create_app


class FixedClock(Clock):
    """Clock whose day only moves when a test says so."""

    def __init__(self, today: date):
        super().__init__("UTC")
        self.current = today

    def today(self) -> date:
        return self.current

    def advance(self, days: int = 1) -> date:
        self.current += timedelta(days=days)
        return self.current


# Monday
START_DAY = date(2026, 1, 5)


def auth_headers_for(user_id) -> dict:
    token = create_access_token({"sub": str(user_id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def clock():
    return FixedClock(START_DAY)


@pytest.fixture
def db():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    session = build_session_factory(engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def user_id():
    return uuid.uuid4()


@pytest.fixture
def auth_headers(user_id):
    return auth_headers_for(user_id)


@pytest.fixture
def client(clock):
    app = create_app(Settings(DATABASE_URL="sqlite://"))
    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app) as test_client:
        yield test_client
