"""Catalog store loader.

Replaces the whole catalog in one transaction, then attaches
credits movie by movie.
"""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from trailerhub.database import (
    CastRepository,
    CrewRepository,
    MovieRepository,
    purge_catalog,
    session_scope,
)
from trailerhub.etl.exceptions import CatalogWriteError
from trailerhub.etl.loaders.base import BaseLoader
from trailerhub.etl.types import NormalizedCastData, NormalizedCrewData, NormalizedMovieData


class CatalogLoader(BaseLoader):
    """Writes a freshly ingested catalog.

    The purge and the bulk insert share a transaction, so a failed
    insert leaves the previous catalog in place.
    """

    name = "catalog"

    def load(self, data: Sequence[NormalizedMovieData]) -> dict[int, UUID]:
        """Alias of replace_catalog."""
        return self.replace_catalog(data)

    def replace_catalog(self, rows: Sequence[NormalizedMovieData]) -> dict[int, UUID]:
        """Delete the catalog and its dependents, then insert rows.

        Args:
            rows: Normalized movie rows.

        Returns:
            Mapping of tmdb_id to the generated movie id.

        Raises:
            CatalogWriteError: If the purge or the insert failed.
        """
        self._logger.info("Clearing existing data from all movie-related tables")
        try:
            with session_scope(self._session_factory) as session:
                self._stats.deleted = purge_catalog(session)
                self._logger.info(f"Cleared catalog: {self._stats.deleted}")

                movies = MovieRepository(session).bulk_insert([dict(row) for row in rows])
                id_map = {movie.tmdb_id: movie.id for movie in movies if movie.tmdb_id is not None}
        except SQLAlchemyError as e:
            self._stats.record_error(str(e))
            self._logger.error(f"Database insert error: {e}")
            raise CatalogWriteError(f"Database error: {e}") from e

        self._stats.inserted += len(id_map)
        self._logger.info(f"Successfully inserted {len(id_map)} movies")
        return id_map

    def load_credits(
        self,
        movie_id: UUID,
        cast: Sequence[NormalizedCastData],
        crew: Sequence[NormalizedCrewData],
    ) -> tuple[int, int]:
        """Attach cast and crew to a stored movie.

        Cast and crew are written in separate transactions. A failed
        write is logged and counted as zero rows.

        Args:
            movie_id: Stored movie id.
            cast: Normalized cast rows.
            crew: Normalized crew rows.

        Returns:
            Tuple of (cast rows written, crew rows written).
        """
        cast_count = self._write(CastRepository, movie_id, cast, "cast") if cast else 0
        crew_count = self._write(CrewRepository, movie_id, crew, "crew") if crew else 0
        return cast_count, crew_count

    def _write(
        self,
        repository: type[CastRepository] | type[CrewRepository],
        movie_id: UUID,
        rows: Sequence[NormalizedCastData] | Sequence[NormalizedCrewData],
        kind: str,
    ) -> int:
        try:
            with session_scope(self._session_factory) as session:
                count = repository(session).insert_many(movie_id, [dict(row) for row in rows])
        except SQLAlchemyError as e:
            self._stats.record_error(f"{kind} insert failed for movie {movie_id}: {e}")
            self._logger.warning(f"Failed to insert {kind} for movie {movie_id}: {e}")
            return 0

        self._stats.inserted += count
        return count
