"""Cast and crew repositories."""

from collections.abc import Sequence
from typing import Any
from uuid import UUID

from sqlalchemy import select

from trailerhub.database.models import CastMember, CrewMember
from trailerhub.database.repositories.base import BaseRepository


class CastRepository(BaseRepository[CastMember]):
    """Repository for cast members."""

    model = CastMember

    def for_movie(self, movie_id: UUID) -> list[CastMember]:
        """Get the cast of a movie in billing order."""
        stmt = (
            select(CastMember)
            .where(CastMember.movie_id == movie_id)
            .order_by(CastMember.order_position)
        )
        return list(self._session.scalars(stmt).all())

    def insert_many(self, movie_id: UUID, rows: Sequence[dict[str, Any]]) -> int:
        """Attach cast rows to a movie.

        Returns:
            Number of inserted rows.
        """
        self.create_many([CastMember(movie_id=movie_id, **row) for row in rows])
        return len(rows)


class CrewRepository(BaseRepository[CrewMember]):
    """Repository for crew members."""

    model = CrewMember

    def for_movie(self, movie_id: UUID) -> list[CrewMember]:
        """Get the crew of a movie ordered by job title."""
        stmt = select(CrewMember).where(CrewMember.movie_id == movie_id).order_by(CrewMember.job)
        return list(self._session.scalars(stmt).all())

    def insert_many(self, movie_id: UUID, rows: Sequence[dict[str, Any]]) -> int:
        """Attach crew rows to a movie.

        Returns:
            Number of inserted rows.
        """
        self.create_many([CrewMember(movie_id=movie_id, **row) for row in rows])
        return len(rows)
