"""Fixtures for HTTP API tests."""

from collections.abc import Callable, Generator
from datetime import UTC, datetime, timedelta
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from trailerhub.api.dependencies.rate_limit import get_rate_limiter
from trailerhub.api.main import app
from trailerhub.database import MovieRepository, Subscriber, get_db, session_scope


@pytest.fixture
def client(session_factory: sessionmaker[Session]) -> Generator[TestClient, None, None]:
    """Test client whose requests use the in-memory catalog store."""

    def override_get_db() -> Generator[Session, None, None]:
        with session_scope(session_factory) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    get_rate_limiter().reset()
    yield TestClient(app)
    app.dependency_overrides.clear()


def _token(client: TestClient, username: str, password: str) -> dict[str, str]:
    response = client.post("/api/v1/auth/token", json={"username": username, "password": password})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def viewer_headers(client: TestClient) -> dict[str, str]:
    return _token(client, "viewer", "viewer-pass-123")


@pytest.fixture
def operator_headers(client: TestClient) -> dict[str, str]:
    return _token(client, "operator", "operator-pass-123")


@pytest.fixture
def seed_movies(session_factory, movie_factory) -> Callable[..., list[UUID]]:
    """Insert movies and return their ids."""

    def seed(*overrides: dict) -> list[UUID]:
        with session_scope(session_factory) as session:
            movies = MovieRepository(session).create_many([movie_factory(**o) for o in overrides])
            return [m.id for m in movies]

    return seed


@pytest.fixture
def subscribe(session_factory) -> Callable[..., None]:
    """Give a user a subscription row."""

    def add(user_id: str, tier: str | None, subscribed: bool = True, days_left: int | None = 30) -> None:
        end = None if days_left is None else datetime.now(UTC) + timedelta(days=days_left)
        with session_scope(session_factory) as session:
            session.add(
                Subscriber(
                    user_id=user_id,
                    subscribed=subscribed,
                    subscription_tier=tier,
                    subscription_end=end,
                )
            )

    return add
