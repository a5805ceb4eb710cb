"""Movie repository with catalog store read and replace operations.

Serves range-based paginated reads ordered by an arbitrary field for
the browsing client, and bulk insert for the ingestion pipeline.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlalchemy import Select, asc, desc, func, nulls_last, select
from sqlalchemy.orm import Session, selectinload

from trailerhub.database.models import Movie
from trailerhub.database.repositories.base import BaseRepository

ORDERABLE_FIELDS = ("title", "release_year", "rating", "duration_minutes", "created_at")


@dataclass(frozen=True)
class MovieFilter:
    """Equality and range constraints for store-side reads.

    Unset attributes are not applied.
    """

    genre: str | None = None
    subscription_tier: str | None = None
    year_min: int | None = None
    year_max: int | None = None
    rating_min: float | None = None
    rating_max: float | None = None

    def apply(self, stmt: Select[Any]) -> Select[Any]:
        """Add WHERE clauses for every set constraint."""
        if self.subscription_tier:
            stmt = stmt.where(Movie.subscription_tier == self.subscription_tier)
        if self.year_min is not None:
            stmt = stmt.where(Movie.release_year >= self.year_min)
        if self.year_max is not None:
            stmt = stmt.where(Movie.release_year <= self.year_max)
        if self.rating_min is not None:
            stmt = stmt.where(Movie.rating >= self.rating_min)
        if self.rating_max is not None:
            stmt = stmt.where(Movie.rating <= self.rating_max)
        return stmt


class MovieRepository(BaseRepository[Movie]):
    """Repository for Movie entity operations."""

    model = Movie

    def __init__(self, session: Session) -> None:
        """Initialize movie repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)

    def get_by_tmdb_id(self, tmdb_id: int) -> Movie | None:
        """Retrieve movie by TMDB identifier.

        Args:
            tmdb_id: TMDB movie ID.

        Returns:
            Movie instance or None.
        """
        return self.find_one(tmdb_id=tmdb_id)

    def get_with_credits(self, movie_id: UUID) -> Movie | None:
        """Retrieve a movie with cast and crew loaded.

        Args:
            movie_id: Primary key.

        Returns:
            Movie with cast_members and crew_members, or None.
        """
        stmt = (
            select(Movie)
            .options(selectinload(Movie.cast_members), selectinload(Movie.crew_members))
            .where(Movie.id == movie_id)
        )
        return self._session.scalars(stmt).first()

    def get_page(
        self,
        offset: int,
        limit: int,
        order_by: str = "release_year",
        ascending: bool = False,
        movie_filter: MovieFilter | None = None,
    ) -> list[Movie]:
        """Read a contiguous range of movies in a stable order.

        Args:
            offset: Index of the first row.
            limit: Maximum number of rows.
            order_by: One of ORDERABLE_FIELDS.
            ascending: Sort direction.
            movie_filter: Optional equality/range constraints.

        Returns:
            Movies in the requested range.

        Raises:
            ValueError: If order_by is not orderable.
        """
        stmt = self._ordered(select(Movie), order_by, ascending)
        if movie_filter is not None:
            stmt = movie_filter.apply(stmt)

        if movie_filter is None or not movie_filter.genre:
            stmt = stmt.offset(offset).limit(limit)
            return list(self._session.scalars(stmt).all())

        # JSON arrays are not portably filterable in SQL
        matching = self._with_genre(self._session.scalars(stmt).all(), movie_filter.genre)
        return matching[offset : offset + limit]

    def count_filtered(self, movie_filter: MovieFilter | None = None) -> int:
        """Count movies matching optional constraints."""
        if movie_filter is not None and movie_filter.genre:
            stmt = movie_filter.apply(select(Movie))
            return len(self._with_genre(self._session.scalars(stmt).all(), movie_filter.genre))

        stmt = select(func.count()).select_from(Movie)
        if movie_filter is not None:
            stmt = movie_filter.apply(stmt)
        return self._session.execute(stmt).scalar() or 0

    @staticmethod
    def _with_genre(movies: Iterable[Movie], genre: str) -> list[Movie]:
        return [m for m in movies if genre in (m.genre or [])]

    @staticmethod
    def _ordered(stmt: Select[Any], order_by: str, ascending: bool) -> Select[Any]:
        if order_by not in ORDERABLE_FIELDS:
            raise ValueError(f"Cannot order movies by {order_by!r}")
        column = getattr(Movie, order_by)
        direction = asc if ascending else desc
        # Primary key tie-break keeps ranges from overlapping between pages
        return stmt.order_by(nulls_last(direction(column)), Movie.id)

    def get_tmdb_id_map(self, tmdb_ids: Iterable[int]) -> dict[int, Movie]:
        """Map TMDB identifiers to stored movies.

        Args:
            tmdb_ids: Identifiers to look up.

        Returns:
            Dict keyed by tmdb_id for every stored match.
        """
        ids = list(tmdb_ids)
        if not ids:
            return {}
        stmt = select(Movie).where(Movie.tmdb_id.in_(ids))
        return {m.tmdb_id: m for m in self._session.scalars(stmt).all() if m.tmdb_id is not None}

    def bulk_insert(self, rows: Sequence[dict[str, Any]]) -> list[Movie]:
        """Insert many movies from column dictionaries.

        Args:
            rows: Movie column values.

        Returns:
            Persisted movies, in input order.
        """
        movies = [Movie(**row) for row in rows]
        return self.create_many(movies)
