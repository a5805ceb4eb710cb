"""Incremental loading of the remote catalog.

The browsing view holds the pages loaded so far and asks for the next
one when the reader scrolls near the bottom.
"""

import logging
from collections.abc import Sequence
from typing import Protocol

import httpx

from trailerhub.catalog.models import MovieRecord
from trailerhub.catalog.query import CatalogQuery, run_query
from trailerhub.catalog.sorting import SortSpec
from trailerhub.settings import settings

logger = logging.getLogger(__name__)


class PageFetchError(Exception):
    """Raised by a page source when a page could not be read."""

    pass


class PageSource(Protocol):
    """Range-paginated, ordered reads of the catalog store."""

    async def fetch_page(self, index: int, size: int, sort: SortSpec) -> Sequence[MovieRecord]:
        """Read page `index` (0-based) of `size` movies."""
        ...


class ApiPageSource:
    """Page source backed by the HTTP API's movie listing."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        path: str = "/api/v1/movies",
        token: str | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            client: Async client whose base_url points at the API.
            path: Listing endpoint.
            token: Optional bearer token.
        """
        self._client = client
        self._path = path
        self._headers = {"Authorization": f"Bearer {token}"} if token else {}

    async def fetch_page(self, index: int, size: int, sort: SortSpec) -> list[MovieRecord]:
        params = {
            "page": index + 1,
            "size": size,
            "order_by": sort.key,
            "ascending": str(sort.ascending).lower(),
        }
        try:
            response = await self._client.get(self._path, params=params, headers=self._headers)
            response.raise_for_status()
            payload = response.json()
            return [MovieRecord.from_api(item) for item in payload["data"]]
        except httpx.HTTPError as e:
            raise PageFetchError(f"Error fetching movies page {index}: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise PageFetchError(f"Malformed movies page {index}: {e}") from e


class CatalogPager:
    """Loaded slice of the catalog plus its paging state.

    Only one load runs at a time. A load started before a reset is
    discarded when it completes.

    Attributes:
        movies: Loaded movies, unique by id, in fetch order.
        has_more: False once a short page was seen.
        last_error: Message of the last failed fetch, cleared on success.
    """

    def __init__(
        self,
        source: PageSource,
        sort: SortSpec | None = None,
        page_size: int | None = None,
        scroll_threshold: int | None = None,
    ) -> None:
        self._source = source
        self._sort = sort or SortSpec()
        self._page_size = page_size or settings.catalog.page_size
        self._scroll_threshold = (
            settings.catalog.scroll_threshold if scroll_threshold is None else scroll_threshold
        )

        self.movies: list[MovieRecord] = []
        self.has_more = True
        self.last_error: str | None = None
        self._current_page = -1
        self._loading = False
        self._generation = 0

    @property
    def sort(self) -> SortSpec:
        return self._sort

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def current_page(self) -> int:
        """Index of the last loaded page, -1 before the first load."""
        return self._current_page

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    async def reset(self) -> None:
        """Drop the loaded slice and load page 0."""
        self._generation += 1
        self.movies = []
        self.has_more = True
        self._current_page = -1
        await self._load(0)

    async def load_more(self) -> bool:
        """Load the next page unless a load is running or data ran out.

        Returns:
            True if a fetch was performed.
        """
        if self._loading or not self.has_more:
            return False
        return await self._load(self._current_page + 1)

    async def set_sort(self, sort: SortSpec) -> None:
        """Change the store ordering and reload from page 0."""
        self._sort = sort
        await self.reset()

    async def _load(self, page: int) -> bool:
        generation = self._generation
        self._loading = True
        try:
            items = await self._source.fetch_page(page, self._page_size, self._sort)
        except PageFetchError as e:
            logger.error(f"Error fetching movies: {e}")
            self.last_error = str(e)
            return True
        finally:
            if generation == self._generation:
                self._loading = False

        if generation != self._generation:
            logger.debug(f"Discarding page {page} loaded before a reset")
            return True

        self._append(items)
        self.has_more = len(items) == self._page_size
        self._current_page = page
        self.last_error = None
        return True

    def _append(self, items: Sequence[MovieRecord]) -> None:
        known = {movie.id for movie in self.movies}
        for item in items:
            if item.id not in known:
                known.add(item.id)
                self.movies.append(item)

    # -------------------------------------------------------------------------
    # Scroll Trigger
    # -------------------------------------------------------------------------

    def should_load_more(
        self,
        scroll_top: float,
        viewport_height: float,
        content_height: float,
    ) -> bool:
        """Whether the viewport is within the threshold of the bottom."""
        return viewport_height + scroll_top >= content_height - self._scroll_threshold

    async def on_scroll(
        self,
        scroll_top: float,
        viewport_height: float,
        content_height: float,
    ) -> bool:
        """Load the next page when scrolled near the bottom.

        Returns:
            True if a fetch was performed.
        """
        if not self.should_load_more(scroll_top, viewport_height, content_height):
            return False
        return await self.load_more()

    def view(self, query: CatalogQuery) -> list[MovieRecord]:
        """Apply a query to the loaded slice."""
        return run_query(self.movies, query)
