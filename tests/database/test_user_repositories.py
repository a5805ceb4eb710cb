"""Tests for per-user repositories and the catalog purge."""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from trailerhub.database import (
    CastRepository,
    MovieRepository,
    Subscriber,
    SubscriberRepository,
    UserRatingRepository,
    ViewingHistoryRepository,
    WatchlistRepository,
    purge_catalog,
)


@pytest.fixture
def movie(session: Session, movie_factory):
    movie = MovieRepository(session).create(movie_factory())
    session.commit()
    return movie


class TestWatchlist:
    @staticmethod
    def test_add_is_idempotent(session: Session, movie) -> None:
        repo = WatchlistRepository(session)
        first = repo.add("alice", movie.id)
        second = repo.add("alice", movie.id)
        assert first.id == second.id
        assert len(repo.for_user("alice")) == 1

    @staticmethod
    def test_remove(session: Session, movie) -> None:
        repo = WatchlistRepository(session)
        repo.add("alice", movie.id)
        assert repo.remove("alice", movie.id) is True
        assert repo.remove("alice", movie.id) is False
        assert repo.for_user("alice") == []

    @staticmethod
    def test_entries_are_per_user(session: Session, movie) -> None:
        repo = WatchlistRepository(session)
        repo.add("alice", movie.id)
        assert repo.for_user("bob") == []


class TestRatings:
    @staticmethod
    def test_upsert_replaces(session: Session, movie) -> None:
        repo = UserRatingRepository(session)
        repo.upsert("alice", movie.id, 3)
        repo.upsert("alice", movie.id, 5)
        assert repo.for_user("alice") == {movie.id: 5}

    @staticmethod
    def test_rating_bounds_enforced(session: Session, movie) -> None:
        with pytest.raises(IntegrityError):
            UserRatingRepository(session).upsert("alice", movie.id, 6)


class TestHistoryAndSubscription:
    @staticmethod
    def test_record_play(session: Session, movie) -> None:
        entry = ViewingHistoryRepository(session).record_play("alice", movie.id)
        assert entry.completed is False
        assert ViewingHistoryRepository(session).count(user_id="alice") == 1

    @staticmethod
    def test_subscriber_lookup(session: Session) -> None:
        session.add(Subscriber(user_id="alice", subscribed=True, subscription_tier="Premium"))
        session.flush()
        found = SubscriberRepository(session).get_for_user("alice")
        assert found is not None
        assert found.subscription_tier == "Premium"
        assert SubscriberRepository(session).get_for_user("bob") is None


class TestPurgeCatalog:
    @staticmethod
    def test_deletes_dependents_then_movies(session: Session, movie) -> None:
        CastRepository(session).insert_many(
            movie.id,
            [{"tmdb_person_id": 1, "name": "Keanu Reeves", "order_position": 0}],
        )
        WatchlistRepository(session).add("alice", movie.id)
        UserRatingRepository(session).upsert("alice", movie.id, 4)
        ViewingHistoryRepository(session).record_play("alice", movie.id)
        session.add(Subscriber(user_id="alice", subscribed=True))
        session.commit()

        deleted = purge_catalog(session)
        session.commit()

        assert list(deleted) == [
            "cast_members",
            "crew_members",
            "user_ratings",
            "viewing_history",
            "watchlist",
            "movies",
        ]
        assert deleted["movies"] == 1
        assert deleted["cast_members"] == 1
        assert MovieRepository(session).count() == 0
        assert SubscriberRepository(session).count() == 1
