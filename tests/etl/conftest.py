"""Fixtures for ingestion tests: a fake TMDB served through httpx.MockTransport."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from trailerhub.etl.extractors.tmdb import TMDBClient
from trailerhub.settings import IngestionSettings, TMDBSettings

# Second strategy pages start far away so ids never collide by accident
STRATEGY_OFFSETS = {"popularity.desc": 0, "vote_average.desc": 100_000}

GARBAGE = b"<html>Bad gateway</html>"


def discover_item(tmdb_id: int, **overrides: Any) -> dict[str, Any]:
    """Raw TMDB discover entry."""
    item: dict[str, Any] = {
        "id": tmdb_id,
        "title": f"Movie {tmdb_id}",
        "overview": f"Overview of movie {tmdb_id}",
        "release_date": "2004-06-18",
        "vote_average": 7.46,
        "vote_count": 1200,
        "genre_ids": [28, 12],
        "poster_path": f"/poster{tmdb_id}.jpg",
    }
    item.update(overrides)
    return item


class FakeTMDB:
    """Request handler emulating the TMDB endpoints used by ingestion.

    Attributes:
        requests: Every request received, in order.
        failing_pages: (sort_by, page) pairs answered with HTTP 500.
        garbled_pages: (sort_by, page) pairs answered with a body that is not JSON.
        garbled_videos: Whether every video listing is answered with garbage.
        garbled_credits: Whether every credits body is answered with garbage.
        credits: Credits payload per tmdb_id; empty cast and crew otherwise.
    """

    def __init__(self, page_size: int = 20) -> None:
        self.page_size = page_size
        self.requests: list[httpx.Request] = []
        self.failing_pages: set[tuple[str, int]] = set()
        self.discover_status = 200
        self.credits: dict[int, dict[str, Any]] = {}
        self.failing_credits: set[int] = set()
        self.pages: dict[tuple[str, int], list[dict[str, Any]]] = {}
        self.garbled_pages: set[tuple[str, int]] = set()
        self.garbled_videos = False
        self.garbled_credits = False

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path.endswith("/discover/movie"):
            return self._discover(request)
        if path.endswith("/videos"):
            if self.garbled_videos:
                return httpx.Response(200, content=GARBAGE)
            tmdb_id = int(path.split("/")[-2])
            return httpx.Response(
                200,
                json={
                    "results": [
                        {"key": f"teaser{tmdb_id}", "site": "YouTube", "type": "Teaser"},
                        {"key": f"trailer{tmdb_id}", "site": "YouTube", "type": "Trailer"},
                    ]
                },
            )
        if path.endswith("/credits"):
            tmdb_id = int(path.split("/")[-2])
            if tmdb_id in self.failing_credits:
                return httpx.Response(500)
            if self.garbled_credits:
                return httpx.Response(200, content=GARBAGE)
            return httpx.Response(200, json=self.credits.get(tmdb_id, {"cast": [], "crew": []}))
        return httpx.Response(404)

    def _discover(self, request: httpx.Request) -> httpx.Response:
        if self.discover_status != 200:
            return httpx.Response(self.discover_status)

        sort_by = request.url.params["sort_by"]
        page = int(request.url.params["page"])
        if (sort_by, page) in self.failing_pages:
            return httpx.Response(500)
        if (sort_by, page) in self.garbled_pages:
            return httpx.Response(200, content=GARBAGE)

        if (sort_by, page) in self.pages:
            results = self.pages[(sort_by, page)]
        else:
            first = STRATEGY_OFFSETS.get(sort_by, 0) + (page - 1) * self.page_size + 1
            results = [discover_item(first + i) for i in range(self.page_size)]
        return httpx.Response(200, json={"page": page, "results": results})

    def paths(self, suffix: str) -> list[httpx.Request]:
        """Requests whose path ends with suffix."""
        return [r for r in self.requests if r.url.path.endswith(suffix)]


@pytest.fixture
def fake_tmdb() -> FakeTMDB:
    return FakeTMDB()


@pytest.fixture
def tmdb_settings() -> TMDBSettings:
    """Settings with a key and a rate limit that never waits."""
    return TMDBSettings(TMDB_API_KEY="test-key", TMDB_REQUESTS_PER_PERIOD=100_000)


@pytest.fixture
def ingestion_settings() -> IngestionSettings:
    return IngestionSettings(INGESTION_TARGET_COUNT=40, INGESTION_SEED=7)


@pytest.fixture
def client_factory(
    fake_tmdb: FakeTMDB,
    tmdb_settings: TMDBSettings,
) -> Callable[[], TMDBClient]:
    return lambda: TMDBClient(tmdb_settings, transport=httpx.MockTransport(fake_tmdb))


@pytest.fixture
def no_sleep() -> Callable[[float], None]:
    return lambda _seconds: None


@pytest.fixture
def make_item() -> Callable[..., dict[str, Any]]:
    """Factory for raw TMDB discover entries."""
    return discover_item
