"""Fixtures for the catalog query engine."""

from datetime import datetime, timezone
from typing import Any

import pytest

from trailerhub.catalog import MovieRecord


def record(movie_id: str, title: str, **overrides: Any) -> MovieRecord:
    values: dict[str, Any] = {
        "id": movie_id,
        "title": title,
        "genre": ("Drama",),
        "rating": 7.0,
        "release_year": 2010,
        "duration_minutes": 120,
        "subscription_tier": "Basic",
    }
    values.update(overrides)
    return MovieRecord(**values)


@pytest.fixture
def make_record():
    return record


@pytest.fixture
def movies() -> list[MovieRecord]:
    """Small mixed catalog in store order."""
    return [
        record(
            "1",
            "Inception",
            genre=("Science Fiction", "Action"),
            rating=8.4,
            release_year=2010,
            duration_minutes=148,
            created_at=datetime(2024, 1, 3, tzinfo=timezone.utc),
        ),
        record(
            "2",
            "The Matrix",
            genre=("Action",),
            rating=8.2,
            release_year=1999,
            duration_minutes=136,
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        ),
        record(
            "3",
            "Amélie",
            genre=("Comedy", "Romance"),
            rating=7.9,
            release_year=2001,
            duration_minutes=122,
            subscription_tier="Premium",
            created_at=datetime(2024, 1, 2, tzinfo=timezone.utc),
        ),
        record(
            "4",
            "Unrated Short",
            genre=("Documentary",),
            rating=None,
            release_year=None,
            duration_minutes=None,
        ),
        record(
            "5",
            "The Matrix Reloaded",
            genre=("Action", "Science Fiction"),
            rating=7.0,
            release_year=2003,
            duration_minutes=138,
            subscription_tier="Premium",
            created_at=datetime(2024, 1, 5, tzinfo=timezone.utc),
        ),
    ]
