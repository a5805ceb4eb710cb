"""Data extractors for the catalog ingestion pipeline."""

from trailerhub.etl.extractors.base import BaseExtractor

__all__ = ["BaseExtractor"]
