"""Catalog ingestion pipeline.

Refreshes the whole catalog from The Movie Database:

1. Discover ranked pages for each strategy until the target is covered
2. Deduplicate by tmdb_id and truncate to the target
3. Resolve a YouTube trailer per movie
4. Normalize (genre label, rating, year, demo tier and runtime)
5. Replace the stored catalog in one transaction
6. Attach cast and crew per movie

Usage:
    from trailerhub.etl import populate_catalog

    report = populate_catalog()
"""

from trailerhub.etl.exceptions import (
    CatalogWriteError,
    IngestionAlreadyRunningError,
    IngestionError,
    ProviderUnavailableError,
)
from trailerhub.etl.pipeline import CatalogPopulator, IngestionReport, populate_catalog

__all__ = [
    "CatalogPopulator",
    "IngestionReport",
    "populate_catalog",
    "IngestionError",
    "ProviderUnavailableError",
    "IngestionAlreadyRunningError",
    "CatalogWriteError",
]
