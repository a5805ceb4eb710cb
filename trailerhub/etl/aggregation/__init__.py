"""Aggregation helpers for discovered movies."""

from trailerhub.etl.aggregation.deduplicator import DeduplicationStats, deduplicate_by_tmdb_id

__all__ = ["DeduplicationStats", "deduplicate_by_tmdb_id"]
