"""TMDB extractor package.

Provides extraction of the top-ranked movies from The Movie Database API.

Classes:
    TMDBCatalogExtractor: Discovery and trailer resolution.
    TMDBClient: HTTP client with rate limiting.
    TMDBNormalizer: Data transformation to catalog rows.

Exceptions:
    TMDBClientError: Base client error.
    TMDBConfigurationError: API key missing.
    TMDBRateLimitError: Rate limit exceeded.
    TMDBNotFoundError: Resource not found.

Usage:
    from trailerhub.etl.extractors.tmdb import TMDBCatalogExtractor, TMDBClient

    with TMDBClient() as client:
        movies = TMDBCatalogExtractor().extract(client)
"""

from trailerhub.etl.extractors.tmdb.client import (
    TMDBClient,
    TMDBClientError,
    TMDBConfigurationError,
    TMDBNotFoundError,
    TMDBRateLimitError,
)
from trailerhub.etl.extractors.tmdb.normalizer import GENRE_NAMES, TMDBNormalizer, genre_name
from trailerhub.etl.extractors.tmdb.tmdb import EnrichedMovie, TMDBCatalogExtractor

__all__ = [
    "TMDBCatalogExtractor",
    "EnrichedMovie",
    "TMDBClient",
    "TMDBNormalizer",
    "GENRE_NAMES",
    "genre_name",
    "TMDBClientError",
    "TMDBConfigurationError",
    "TMDBRateLimitError",
    "TMDBNotFoundError",
]
