"""Catalog store loaders."""

from trailerhub.etl.loaders.base import BaseLoader, LoaderStats
from trailerhub.etl.loaders.catalog import CatalogLoader

__all__ = ["BaseLoader", "LoaderStats", "CatalogLoader"]
