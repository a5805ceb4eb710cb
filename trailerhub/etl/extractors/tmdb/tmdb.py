"""TMDB catalog extractor.

Discovers candidate movies across several ranking strategies and
resolves a trailer for each unique candidate.
"""

import time
from collections.abc import Callable
from typing import Any

from trailerhub.etl.aggregation import deduplicate_by_tmdb_id
from trailerhub.etl.exceptions import ProviderUnavailableError
from trailerhub.etl.extractors.base import BaseExtractor
from trailerhub.etl.extractors.tmdb.client import TMDBClient, TMDBClientError
from trailerhub.etl.extractors.tmdb.normalizer import TMDBNormalizer
from trailerhub.etl.types import TMDBMovieData
from trailerhub.settings import IngestionSettings, settings

EnrichedMovie = tuple[TMDBMovieData, str | None]


class TMDBCatalogExtractor(BaseExtractor):
    """Extracts the top of TMDB's catalog.

    Every provider call is isolated: a failed page or trailer lookup
    is logged and recorded, then skipped.

    Attributes:
        pages_fetched: Discovery pages answered during the last run.
    """

    name = "tmdb"

    def __init__(
        self,
        config: IngestionSettings | None = None,
        normalizer: TMDBNormalizer | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(sleep=sleep)
        self._config = config or settings.ingestion
        self._normalizer = normalizer or TMDBNormalizer(self._config)
        self.pages_fetched = 0

    # -------------------------------------------------------------------------
    # Main Extraction
    # -------------------------------------------------------------------------

    def extract(self, client: TMDBClient, **_kwargs: Any) -> list[EnrichedMovie]:
        """Discover, deduplicate and attach trailers.

        Args:
            client: Open TMDB client.

        Returns:
            Unique movies in discovery order, each with its trailer URL.

        Raises:
            ProviderUnavailableError: If no discovery page could be fetched.
        """
        self._start_extraction()

        discovered = self.discover(client)
        unique = deduplicate_by_tmdb_id(discovered, limit=self._config.target_count)
        self._logger.info(
            f"Discovered {len(discovered)} movies, {len(unique)} unique "
            f"(target {self._config.target_count})"
        )

        enriched: list[EnrichedMovie] = []
        for position, movie in enumerate(unique, start=1):
            enriched.append((movie, self.resolve_trailer(client, movie["id"])))
            self._extracted_count += 1
            if position % self._config.movie_log_interval == 0:
                self._log_progress(position, len(unique))

        self._end_extraction()
        return enriched

    def discover(self, client: TMDBClient) -> list[TMDBMovieData]:
        """Fetch ranked discovery pages until the target is covered.

        Strategies are walked in order, each for an even share of pages.
        The accumulator is checked after every page and fetching stops
        once it holds at least target_count records.

        Args:
            client: Open TMDB client.

        Returns:
            Raw accumulator, duplicates included.

        Raises:
            ProviderUnavailableError: If every page request failed.
        """
        cfg = self._config
        accumulator: list[TMDBMovieData] = []
        self.pages_fetched = 0

        for strategy in cfg.sort_strategies:
            self._logger.info(f"Fetching top movies sorted by {strategy}")

            for page in range(1, cfg.pages_per_strategy + 1):
                results = self._fetch_page(client, strategy, page)
                if results:
                    accumulator.extend(results)
                    self._logger.debug(
                        f"Fetched {len(results)} movies from page {page} ({strategy})"
                    )
                self._pause(cfg.discover_delay)

                if len(accumulator) >= cfg.target_count:
                    self._logger.info(f"Reached target of {cfg.target_count} movies")
                    break

            if len(accumulator) >= cfg.target_count:
                break

        if self.pages_fetched == 0:
            raise ProviderUnavailableError("No discovery page could be fetched from TMDB")

        return accumulator

    def _fetch_page(
        self,
        client: TMDBClient,
        strategy: str,
        page: int,
    ) -> list[TMDBMovieData] | None:
        cfg = self._config
        try:
            response = client.discover_movies(
                sort_by=strategy,
                page=page,
                min_vote_count=cfg.min_vote_count,
                include_adult=cfg.include_adult,
                min_release_date=cfg.min_release_date,
            )
        except TMDBClientError as e:
            self._log_error(f"Error fetching page {page} with sort {strategy}: {e}")
            return None

        results = response.get("results") or []
        if not isinstance(results, list):
            self._log_error(f"Malformed page {page} with sort {strategy}: results is not a list")
            return None

        self.pages_fetched += 1
        return [item for item in results if isinstance(item, dict)]

    def resolve_trailer(self, client: TMDBClient, tmdb_id: int) -> str | None:
        """Find the trailer watch URL of a movie.

        Args:
            client: Open TMDB client.
            tmdb_id: TMDB movie ID.

        Returns:
            Watch URL, or None when absent or the lookup failed.
        """
        try:
            videos = client.get_movie_videos(tmdb_id)
        except TMDBClientError as e:
            self._logger.warning(f"Error fetching trailer for movie {tmdb_id}: {e}")
            return None
        finally:
            self._pause(self._config.trailer_delay)

        results = videos.get("results") or []
        if not isinstance(results, list):
            self._logger.warning(f"Malformed video listing for movie {tmdb_id}")
            return None
        return self._normalizer.select_trailer(results)
