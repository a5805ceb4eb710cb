"""Catalog ingestion pipeline orchestration."""

from trailerhub.etl.pipeline.populate import (
    CatalogPopulator,
    IngestionReport,
    populate_catalog,
)

__all__ = ["CatalogPopulator", "IngestionReport", "populate_catalog"]
