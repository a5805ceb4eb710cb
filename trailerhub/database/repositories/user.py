"""Repositories for per-user data: watchlist, ratings, history, subscription."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from trailerhub.database.models import (
    Subscriber,
    UserRating,
    ViewingHistory,
    WatchlistEntry,
)
from trailerhub.database.repositories.base import BaseRepository


class WatchlistRepository(BaseRepository[WatchlistEntry]):
    """Repository for watchlist entries."""

    model = WatchlistEntry

    def for_user(self, user_id: str) -> list[WatchlistEntry]:
        """Get a user's watchlist, most recently added first."""
        stmt = (
            select(WatchlistEntry)
            .options(joinedload(WatchlistEntry.movie))
            .where(WatchlistEntry.user_id == user_id)
            .order_by(WatchlistEntry.created_at.desc())
        )
        return list(self._session.scalars(stmt).all())

    def find(self, user_id: str, movie_id: UUID) -> WatchlistEntry | None:
        """Get one watchlist entry."""
        return self.find_one(user_id=user_id, movie_id=movie_id)

    def add(self, user_id: str, movie_id: UUID) -> WatchlistEntry:
        """Add a movie to a user's watchlist (no-op when already present)."""
        existing = self.find(user_id, movie_id)
        if existing is not None:
            return existing
        return self.create(WatchlistEntry(user_id=user_id, movie_id=movie_id))

    def remove(self, user_id: str, movie_id: UUID) -> bool:
        """Remove a movie from a user's watchlist.

        Returns:
            True if an entry was deleted.
        """
        entry = self.find(user_id, movie_id)
        if entry is None:
            return False
        self.delete(entry)
        return True


class UserRatingRepository(BaseRepository[UserRating]):
    """Repository for user star ratings."""

    model = UserRating

    def for_user(self, user_id: str) -> dict[UUID, int]:
        """Map movie id to the user's rating."""
        stmt = select(UserRating).where(UserRating.user_id == user_id)
        return {r.movie_id: r.rating for r in self._session.scalars(stmt).all()}

    def upsert(self, user_id: str, movie_id: UUID, rating: int) -> UserRating:
        """Create or update the user's rating of a movie."""
        existing = self.find_one(user_id=user_id, movie_id=movie_id)
        if existing is None:
            return self.create(UserRating(user_id=user_id, movie_id=movie_id, rating=rating))
        existing.rating = rating
        self._session.flush()
        return existing


class ViewingHistoryRepository(BaseRepository[ViewingHistory]):
    """Repository for viewing history."""

    model = ViewingHistory

    def record_play(self, user_id: str, movie_id: UUID) -> ViewingHistory:
        """Record the start of a play."""
        return self.create(
            ViewingHistory(
                user_id=user_id,
                movie_id=movie_id,
                progress_seconds=0,
                completed=False,
            )
        )


class SubscriberRepository(BaseRepository[Subscriber]):
    """Read access to subscription state."""

    model = Subscriber

    def get_for_user(self, user_id: str) -> Subscriber | None:
        """Get the subscription row of a user."""
        return self.find_one(user_id=user_id)


def purge_catalog(session: Session) -> dict[str, int]:
    """Delete the whole catalog and every row that references it.

    Dependents go first (cast, crew, ratings, history, watchlist), then
    movies, so no foreign key is ever left dangling.

    Args:
        session: Session holding the refresh transaction.

    Returns:
        Deleted row counts per table.
    """
    from trailerhub.database.repositories.credit import CastRepository, CrewRepository
    from trailerhub.database.repositories.movie import MovieRepository

    deleted: dict[str, int] = {}
    for repo_cls in (
        CastRepository,
        CrewRepository,
        UserRatingRepository,
        ViewingHistoryRepository,
        WatchlistRepository,
        MovieRepository,
    ):
        repo = repo_cls(session)
        deleted[repo.model.__tablename__] = repo.delete_all()
    return deleted
