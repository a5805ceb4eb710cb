"""Catalog refresh orchestration.

Runs the full ingestion: discover, deduplicate, resolve trailers,
normalize, replace the stored catalog, then attach credits.

Usage:
    from trailerhub.etl.pipeline import populate_catalog

    report = populate_catalog()
    print(report.to_response())
"""

import random
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from trailerhub.database import CatalogLockHeldError, CatalogRefreshLock, get_session_factory
from trailerhub.etl.exceptions import IngestionAlreadyRunningError, IngestionError
from trailerhub.etl.extractors.tmdb import (
    TMDBCatalogExtractor,
    TMDBClient,
    TMDBClientError,
    TMDBNormalizer,
)
from trailerhub.etl.loaders import CatalogLoader
from trailerhub.etl.types import TMDBMovieData
from trailerhub.etl.utils import bind_run, setup_logger
from trailerhub.monitoring import (
    CATALOG_SIZE,
    INGESTION_DURATION,
    INGESTION_RUNS_TOTAL,
    PROVIDER_ERRORS_TOTAL,
)
from trailerhub.settings import IngestionSettings, TMDBSettings, settings

logger = setup_logger("etl.pipeline.populate")

ClientFactory = Callable[[], TMDBClient]


# =============================================================================
# REPORT
# =============================================================================


@dataclass
class IngestionReport:
    """Outcome of a catalog refresh.

    Attributes:
        success: Whether the catalog was replaced.
        movies: Movies written.
        cast: Cast rows written.
        crew: Crew rows written.
        error: Fatal error message, if any.
        already_running: Whether the run was refused by the refresh lock.
        warnings: Per-call failures that were skipped.
        duration_seconds: Wall time of the run.
        run_id: Id stamped on every log line of the run.
    """

    success: bool = False
    movies: int = 0
    cast: int = 0
    crew: int = 0
    error: str | None = None
    already_running: bool = False
    warnings: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0
    run_id: str = ""

    @property
    def message(self) -> str:
        """Human-readable summary of a successful run."""
        return (
            f"Successfully added {self.movies} movies with {self.cast} cast members "
            f"and {self.crew} crew members"
        )

    def to_response(self) -> dict[str, Any]:
        """Build the trigger response body."""
        if not self.success:
            return {"error": self.error or "Unknown error"}
        return {
            "success": True,
            "message": self.message,
            "movies": self.movies,
            "cast": self.cast,
            "crew": self.crew,
        }


# =============================================================================
# ORCHESTRATOR
# =============================================================================


class CatalogPopulator:
    """Runs one catalog refresh under the refresh lock.

    Every collaborator is injectable: tests pass a client factory
    backed by httpx.MockTransport, an in-memory session factory,
    a seeded Random and a no-op sleep.
    """

    def __init__(
        self,
        config: IngestionSettings | None = None,
        tmdb_config: TMDBSettings | None = None,
        client_factory: ClientFactory | None = None,
        session_factory: sessionmaker[Session] | None = None,
        engine: Engine | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._config = config or settings.ingestion
        self._tmdb_config = tmdb_config or settings.tmdb
        self._client_factory = client_factory or (lambda: TMDBClient(self._tmdb_config))
        self._session_factory = session_factory or get_session_factory()
        self._engine = engine or self._session_factory.kw.get("bind")
        self._rng = rng or random.Random(self._config.seed)
        self._sleep = sleep

        self._normalizer = TMDBNormalizer(self._config, self._tmdb_config)
        self._extractor = TMDBCatalogExtractor(self._config, self._normalizer, sleep=sleep)
        self._loader = CatalogLoader(self._session_factory)

    def run(self) -> IngestionReport:
        """Execute the refresh and report its outcome.

        Errors are reported, never raised.

        Returns:
            IngestionReport of the run.
        """
        with bind_run() as run_id:
            return self._run(IngestionReport(run_id=run_id))

    def _run(self, report: IngestionReport) -> IngestionReport:
        started = time.perf_counter()
        lock = CatalogRefreshLock(self._engine, self._config.lock_key)

        try:
            self._acquire(lock)
        except IngestionAlreadyRunningError as e:
            logger.warning(f"Refresh refused: {e}")
            report.error = str(e)
            report.already_running = True
            INGESTION_RUNS_TOTAL.labels(outcome="already_running").inc()
            return report

        try:
            self._execute(report)
            report.success = True
        except (IngestionError, TMDBClientError) as e:
            logger.error(f"ERROR in catalog refresh: {e}")
            report.error = str(e)
        except Exception as e:
            logger.exception(f"Catalog refresh failed: {e}")
            report.error = f"Unexpected error: {e}"
        finally:
            lock.release()
            report.duration_seconds = time.perf_counter() - started

        report.warnings = self._extractor.errors + self._loader.stats.error_messages + report.warnings
        self._record_metrics(report)
        return report

    @staticmethod
    def _acquire(lock: CatalogRefreshLock) -> None:
        try:
            lock.acquire()
        except CatalogLockHeldError as e:
            raise IngestionAlreadyRunningError(str(e)) from e

    def _execute(self, report: IngestionReport) -> None:
        logger.info("Catalog refresh started")

        with self._client_factory() as client:
            enriched = self._extractor.extract(client)

            rows = self._normalizer.normalize_movies(enriched, self._rng)
            logger.info(f"Transformed movies data: {len(rows)} rows")

            id_map = self._loader.replace_catalog(rows)
            report.movies = len(id_map)

            logger.info("Fetching cast and crew data for movies")
            movies = [movie for movie, _trailer in enriched]
            report.cast, report.crew = self._load_credits(client, movies, id_map, report)

        logger.info(f"Successfully inserted cast and crew data: cast={report.cast}, crew={report.crew}")

    def _load_credits(
        self,
        client: TMDBClient,
        movies: Sequence[TMDBMovieData],
        id_map: dict[int, UUID],
        report: IngestionReport,
    ) -> tuple[int, int]:
        """Fetch and store credits of every inserted movie.

        Credits are joined to stored rows by tmdb_id.

        Returns:
            Tuple of (cast rows, crew rows) written.
        """
        cast_total = crew_total = 0
        stored = [movie for movie in movies if movie["id"] in id_map]

        for position, movie in enumerate(stored, start=1):
            tmdb_id = movie["id"]
            try:
                credits = client.get_movie_credits(tmdb_id)
                cast = self._normalizer.normalize_cast(credits.get("cast") or [])
                crew = self._normalizer.normalize_crew(credits.get("crew") or [])
            except (TMDBClientError, KeyError, TypeError, AttributeError) as e:
                message = f"Error fetching credits for movie {tmdb_id}: {e}"
                logger.warning(message)
                report.warnings.append(message)
                PROVIDER_ERRORS_TOTAL.labels(stage="credits").inc()
            else:
                cast_count, crew_count = self._loader.load_credits(id_map[tmdb_id], cast, crew)
                cast_total += cast_count
                crew_total += crew_count

            if self._config.credits_delay > 0:
                self._sleep(self._config.credits_delay)

            if position % self._config.credits_log_interval == 0:
                logger.info(f"Processed cast/crew for {position}/{len(stored)} movies")

        return cast_total, crew_total

    def _record_metrics(self, report: IngestionReport) -> None:
        INGESTION_RUNS_TOTAL.labels(outcome="success" if report.success else "error").inc()
        INGESTION_DURATION.observe(report.duration_seconds)
        for _ in self._extractor.errors:
            PROVIDER_ERRORS_TOTAL.labels(stage="discover").inc()
        if report.success:
            CATALOG_SIZE.set(report.movies)


def populate_catalog(**kwargs: Any) -> IngestionReport:
    """Run one catalog refresh.

    Args:
        **kwargs: CatalogPopulator arguments.

    Returns:
        IngestionReport of the run.
    """
    return CatalogPopulator(**kwargs).run()
