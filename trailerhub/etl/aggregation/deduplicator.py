"""Movie deduplication module.

Collapses the discovery accumulator to unique movies by tmdb_id.
The same movie usually shows up under several ranking strategies.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from trailerhub.etl.types import TMDBMovieData

logger = logging.getLogger(__name__)


@dataclass
class DeduplicationStats:
    """Statistics for a deduplication pass.

    Attributes:
        total_input: Records before deduplication.
        duplicates: Records dropped as repeats of an earlier id.
        missing_id: Records dropped for lacking an id.
        truncated: Unique records dropped by the limit.
        total_output: Records returned.
    """

    total_input: int = 0
    duplicates: int = 0
    missing_id: int = 0
    truncated: int = 0
    total_output: int = 0

    def log_summary(self) -> None:
        """Log deduplication statistics summary."""
        logger.info(
            "Deduplication: %d -> %d movies (-%d duplicates, -%d without id, -%d over limit)",
            self.total_input,
            self.total_output,
            self.duplicates,
            self.missing_id,
            self.truncated,
        )


def deduplicate_by_tmdb_id(
    records: Iterable[TMDBMovieData],
    limit: int | None = None,
    stats: DeduplicationStats | None = None,
) -> list[TMDBMovieData]:
    """Keep the first occurrence of every tmdb_id, in input order.

    Args:
        records: Raw discovery records.
        limit: Maximum number of records returned.
        stats: Optional stats object filled in place.

    Returns:
        Unique records, truncated to limit.
    """
    stats = stats if stats is not None else DeduplicationStats()
    seen: set[int] = set()
    unique: list[TMDBMovieData] = []

    for record in records:
        stats.total_input += 1
        tmdb_id = record.get("id")
        if tmdb_id is None:
            stats.missing_id += 1
            continue
        if tmdb_id in seen:
            stats.duplicates += 1
            continue
        seen.add(tmdb_id)
        unique.append(record)

    if limit is not None and len(unique) > limit:
        stats.truncated = len(unique) - limit
        unique = unique[:limit]

    stats.total_output = len(unique)
    stats.log_summary()
    return unique
