"""ETL data types.

TypedDict definitions for raw TMDB payloads and for the normalized
rows written to the catalog store.

Usage:
    from trailerhub.etl.types import TMDBMovieData, NormalizedMovieData
"""

from typing import NotRequired, TypedDict

# =============================================================================
# RAW TMDB PAYLOADS
# =============================================================================


class TMDBMovieData(TypedDict):
    """Movie entry of a TMDB discover page."""

    id: int
    title: str
    overview: NotRequired[str | None]
    release_date: NotRequired[str | None]
    popularity: NotRequired[float]
    vote_average: NotRequired[float]
    vote_count: NotRequired[int]
    adult: NotRequired[bool]
    genre_ids: NotRequired[list[int]]
    poster_path: NotRequired[str | None]
    backdrop_path: NotRequired[str | None]


class TMDBDiscoverResponse(TypedDict):
    """TMDB /discover/movie response."""

    page: int
    results: list[TMDBMovieData]
    total_pages: NotRequired[int]
    total_results: NotRequired[int]


class TMDBVideoData(TypedDict):
    """Entry of a TMDB /movie/{id}/videos listing."""

    key: str
    site: str
    type: str
    name: NotRequired[str]
    official: NotRequired[bool]


class TMDBCastData(TypedDict):
    """Cast entry of a TMDB credits response."""

    id: int
    name: str
    character: NotRequired[str | None]
    order: NotRequired[int]
    profile_path: NotRequired[str | None]


class TMDBCrewData(TypedDict):
    """Crew entry of a TMDB credits response."""

    id: int
    name: str
    job: str
    department: NotRequired[str | None]
    profile_path: NotRequired[str | None]


class TMDBCreditsData(TypedDict):
    """TMDB /movie/{id}/credits response."""

    id: NotRequired[int]
    cast: list[TMDBCastData]
    crew: list[TMDBCrewData]


# =============================================================================
# NORMALIZED ROWS
# =============================================================================


class NormalizedMovieData(TypedDict):
    """Column values of a catalog movie row."""

    tmdb_id: int
    title: str
    description: str | None
    genre: list[str]
    rating: float | None
    release_year: int | None
    duration_minutes: int
    poster_url: str | None
    trailer_url: str | None
    video_url: str | None
    subscription_tier: str


class NormalizedCastData(TypedDict):
    """Column values of a cast row (movie_id added at insert)."""

    tmdb_person_id: int
    name: str
    character_name: str | None
    profile_picture_url: str | None
    order_position: int


class NormalizedCrewData(TypedDict):
    """Column values of a crew row (movie_id added at insert)."""

    tmdb_person_id: int
    name: str
    job: str
    department: str | None
    profile_picture_url: str | None


# =============================================================================
# PIPELINE
# =============================================================================


class ETLResult(TypedDict):
    """Result of an ETL extraction step."""

    source: str
    success: bool
    count: int
    errors: NotRequired[list[str]]
    duration_seconds: NotRequired[float]
