"""TMDB API client with rate limiting.

Handles HTTP communication with The Movie Database API
including authentication, rate limiting, and retries.
"""

import logging
import time
from datetime import date
from types import TracebackType
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from trailerhub.etl.types import (
    TMDBCreditsData,
    TMDBDiscoverResponse,
)
from trailerhub.settings import TMDBSettings, settings

logger = logging.getLogger(__name__)


class TMDBClientError(Exception):
    """Base exception for TMDB client errors."""

    pass


class TMDBConfigurationError(TMDBClientError):
    """Raised when the API key is missing."""

    pass


class TMDBRateLimitError(TMDBClientError):
    """Raised when rate limit is exceeded."""

    pass


class TMDBNotFoundError(TMDBClientError):
    """Raised when resource is not found."""

    pass


class TMDBClient:
    """HTTP client for TMDB API with rate limiting.

    Implements sliding window rate limiting to respect
    TMDB's API limits (40 requests per 10 seconds by default).

    Example:
        ```python
        with TMDBClient() as client:
            page = client.discover_movies(sort_by="popularity.desc", page=1)
        ```
    """

    def __init__(
        self,
        config: TMDBSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize TMDB client.

        Args:
            config: TMDB settings (defaults to the global ones).
            transport: Optional httpx transport (tests use MockTransport).
        """
        cfg = config or settings.tmdb
        self._config = cfg
        self._base_url = cfg.base_url
        self._api_key = cfg.api_key
        self._language = cfg.language
        self._transport = transport

        # Rate limiting state
        self._requests_per_period = cfg.requests_per_period
        self._period_seconds = cfg.period_seconds
        self._min_delay = cfg.min_request_delay
        self._request_times: list[float] = []

        self._client: httpx.Client | None = None

    # -------------------------------------------------------------------------
    # Context Manager
    # -------------------------------------------------------------------------

    def __enter__(self) -> "TMDBClient":
        """Enter context and create HTTP client.

        Raises:
            TMDBConfigurationError: If no API key is configured.
        """
        if not self._config.is_configured:
            raise TMDBConfigurationError("TMDB_API_KEY is not set")

        self._client = httpx.Client(
            timeout=self._config.timeout,
            headers={"User-Agent": self._config.user_agent},
            transport=self._transport,
        )
        return self

    def __exit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        """Exit context and close HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    # -------------------------------------------------------------------------
    # Rate Limiting
    # -------------------------------------------------------------------------

    def _wait_for_rate_limit(self) -> None:
        """Wait if necessary to respect rate limits."""
        now = time.time()

        # Remove old request times outside the window
        cutoff = now - self._period_seconds
        self._request_times = [t for t in self._request_times if t > cutoff]

        if len(self._request_times) >= self._requests_per_period:
            oldest = self._request_times[0]
            wait_time = oldest + self._period_seconds - now
            if wait_time > 0:
                logger.debug(f"Rate limit: waiting {wait_time:.2f}s")
                time.sleep(wait_time)

        # Enforce minimum delay between requests
        if self._request_times and self._min_delay > 0:
            elapsed = now - self._request_times[-1]
            if elapsed < self._min_delay:
                time.sleep(self._min_delay - elapsed)

        self._request_times.append(time.time())

    # -------------------------------------------------------------------------
    # HTTP Methods
    # -------------------------------------------------------------------------

    def _get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute GET request, reporting exhausted timeouts as client errors."""
        try:
            return self._request(endpoint, params)
        except httpx.TimeoutException as e:
            raise TMDBClientError(f"Timed out requesting {endpoint}") from e

    @retry(
        retry=retry_if_exception_type((httpx.TimeoutException, TMDBRateLimitError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    def _request(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute GET request with rate limiting and retries.

        Args:
            endpoint: API endpoint path.
            params: Optional query parameters.

        Returns:
            JSON response as dictionary.

        Raises:
            TMDBClientError: On API or transport errors.
            TMDBNotFoundError: When resource not found.
            TMDBRateLimitError: When rate limit exceeded.
        """
        if self._client is None:
            msg = "Client not initialized. Use context manager."
            raise TMDBClientError(msg)

        self._wait_for_rate_limit()

        request_params: dict[str, Any] = {"api_key": self._api_key, "language": self._language}
        if params:
            request_params.update(params)

        url = f"{self._base_url}{endpoint}"

        try:
            response = self._client.get(url, params=request_params)
        except httpx.TimeoutException:
            logger.warning(f"Request timeout: {endpoint}")
            raise
        except httpx.TransportError as e:
            raise TMDBClientError(f"Cannot reach TMDB ({endpoint}): {e}") from e

        return self._handle_response(response, endpoint)

    @staticmethod
    def _handle_response(
        response: httpx.Response,
        endpoint: str,
    ) -> dict[str, Any]:
        """Handle HTTP response and extract JSON.

        Raises:
            TMDBClientError: On API errors or a body that is not a JSON object.
            TMDBNotFoundError: When resource not found (404).
            TMDBRateLimitError: When rate limit exceeded (429).
        """
        if response.status_code == 200:
            try:
                payload = response.json()
            except ValueError as e:
                raise TMDBClientError(f"Malformed JSON from {endpoint}") from e
            if not isinstance(payload, dict):
                raise TMDBClientError(f"Unexpected {type(payload).__name__} payload from {endpoint}")
            return payload

        if response.status_code == 404:
            raise TMDBNotFoundError(f"Not found: {endpoint}")

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After", "10")
            logger.warning(f"Rate limited. Retry after {retry_after}s")
            raise TMDBRateLimitError(f"Rate limited: {endpoint}")

        error_msg = f"TMDB API error {response.status_code}: {endpoint}"
        logger.error(error_msg)
        raise TMDBClientError(error_msg)

    # -------------------------------------------------------------------------
    # API Endpoints
    # -------------------------------------------------------------------------

    def discover_movies(
        self,
        sort_by: str,
        page: int = 1,
        min_vote_count: int = 0,
        include_adult: bool = False,
        min_release_date: date | None = None,
    ) -> TMDBDiscoverResponse:
        """Discover movies ranked by a strategy.

        Args:
            sort_by: Ranking strategy (e.g. 'popularity.desc').
            page: Page number (1-500).
            min_vote_count: Vote-count floor.
            include_adult: Whether adult titles are allowed.
            min_release_date: Release-date floor.

        Returns:
            Discover response with results.
        """
        params: dict[str, Any] = {
            "sort_by": sort_by,
            "page": page,
            "vote_count.gte": min_vote_count,
            "include_adult": str(include_adult).lower(),
        }
        if min_release_date:
            params["primary_release_date.gte"] = min_release_date.isoformat()

        return self._get("/discover/movie", params)  # type: ignore[return-value]

    def get_movie_videos(self, movie_id: int) -> dict[str, Any]:
        """Get the video listing of a movie.

        Args:
            movie_id: TMDB movie ID.

        Returns:
            Videos response with a 'results' list.
        """
        return self._get(f"/movie/{movie_id}/videos")

    def get_movie_credits(self, movie_id: int) -> TMDBCreditsData:
        """Get movie cast and crew.

        Args:
            movie_id: TMDB movie ID.

        Returns:
            Credits response with cast and crew.
        """
        return self._get(f"/movie/{movie_id}/credits")  # type: ignore[return-value]
