"""Tests for the in-memory movie record."""

import uuid
from datetime import datetime, timezone

from trailerhub.catalog import MovieRecord


class TestMovieRecord:
    @staticmethod
    def test_from_api() -> None:
        record = MovieRecord.from_api(
            {
                "id": "8f1c7c1e-0000-4000-8000-000000000001",
                "title": "Heat",
                "genre": ["Crime", "Thriller"],
                "rating": "8.3",
                "release_year": 1995,
                "duration_minutes": 170,
                "subscription_tier": "Premium",
                "created_at": "2024-03-01T10:00:00+00:00",
            }
        )
        assert record.genre == ("Crime", "Thriller")
        assert record.rating == 8.3
        assert record.created_at == datetime(2024, 3, 1, 10, tzinfo=timezone.utc)
        assert record.description is None

    @staticmethod
    def test_from_api_defaults() -> None:
        record = MovieRecord.from_api({"id": 1, "title": "X", "genre": None})
        assert record.id == "1"
        assert record.genre == ()
        assert record.subscription_tier == "Basic"

    @staticmethod
    def test_from_orm(movie_factory) -> None:
        movie = movie_factory(id=uuid.uuid4())
        record = MovieRecord.from_orm(movie)
        assert record.id == str(movie.id)
        assert record.title == "The Matrix"
        assert record.genre == ("Action",)

    @staticmethod
    def test_equality_ignores_timestamps() -> None:
        a = MovieRecord(id="1", title="A", created_at=datetime(2024, 1, 1))
        b = MovieRecord(id="1", title="A", created_at=datetime(2025, 1, 1))
        assert a == b
