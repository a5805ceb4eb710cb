"""Shared pytest fixtures.

Environment variables are set before any trailerhub import so the
settings singleton is built from deterministic values.
"""

import os

os.environ.update(
    {
        "ENVIRONMENT": "test",
        "DEBUG": "false",
        "LOG_LEVEL": "INFO",
        "LOG_TO_FILE": "false",
        "JWT_SECRET_KEY": "test_jwt_secret_key_12345678901234567890",
        "JWT_ALGORITHM": "HS256",
        "JWT_EXPIRE_MINUTES": "30",
        "AUTH_DEMO_USERS": "viewer:viewer-pass-123,operator:operator-pass-123",
        "ADMIN_USERS": "operator",
        "RATE_LIMIT_PER_MINUTE": "1000",
        "TMDB_API_KEY": "test_api_key_12345678901234567890",
        "DATABASE_URL": "sqlite://",
        "CORS_ORIGINS": "http://localhost:3000",
    }
)

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import Engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from trailerhub.database import (  # noqa: E402
    Movie,
    build_engine,
    init_schema,
    make_session_factory,
)


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite catalog store shared by every session of a test."""
    engine = build_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return make_session_factory(engine)


@pytest.fixture
def session(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    session = session_factory()
    yield session
    session.close()


def make_movie(**overrides: Any) -> Movie:
    """Build an unsaved Movie with sensible defaults."""
    values: dict[str, Any] = {
        "tmdb_id": 603,
        "title": "The Matrix",
        "description": "A hacker learns the world is a simulation.",
        "genre": ["Action"],
        "rating": 8.2,
        "release_year": 1999,
        "duration_minutes": 136,
        "poster_url": "https://image.tmdb.org/t/p/w500/matrix.jpg",
        "trailer_url": "https://www.youtube.com/watch?v=vKQi3bBA1y8",
        "subscription_tier": "Basic",
    }
    values.update(overrides)
    return Movie(**values)


@pytest.fixture
def movie_factory():
    """Factory fixture for unsaved Movie rows."""
    return make_movie
