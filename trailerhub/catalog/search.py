"""Fuzzy text search over the loaded catalog.

A query hits a field when some stretch of the field is within a number
of edits proportional to the query length. Transposed letters count as
one edit, so "matirx" finds "The Matrix" while a short genre label that
merely resembles part of a longer query does not.
"""

from collections.abc import Sequence

from rapidfuzz import fuzz, utils
from rapidfuzz.distance import OSA

from trailerhub.catalog.models import MovieRecord
from trailerhub.settings import settings


def similarity(query: str, text: str) -> float:
    """Score a processed query against a processed field.

    The best-aligned window of the field is compared with the query and
    the edit distance is normalised by the query length, giving 0-100.
    Fields shorter than the query are compared whole.

    Args:
        query: Processed search term.
        text: Processed field value.

    Returns:
        Similarity between 0 and 100.
    """
    if not query or not text:
        return 0.0

    if len(text) < len(query):
        window = text
    else:
        alignment = fuzz.partial_ratio_alignment(query, text)
        if alignment is None:
            return 0.0
        window = text[alignment.dest_start : alignment.dest_end]

    edits = OSA.distance(query, window)
    return max(0.0, 100.0 * (1 - edits / len(query)))


class FuzzyIndex:
    """Approximate matcher over a fixed set of movies.

    Example:
        ```python
        index = FuzzyIndex(movies)
        hits = index.search("matirx")
        ```
    """

    def __init__(
        self,
        movies: Sequence[MovieRecord],
        threshold: float | None = None,
    ) -> None:
        """Initialize the index.

        Args:
            movies: Movies to search.
            threshold: Minimum 0-100 similarity of a hit.
        """
        self._movies = list(movies)
        self._threshold = settings.catalog.fuzzy_threshold if threshold is None else threshold
        self._fields = [self._searchable(movie) for movie in self._movies]

    @staticmethod
    def _searchable(movie: MovieRecord) -> list[str]:
        fields = [movie.title, movie.description or "", *movie.genre]
        return [utils.default_process(f) for f in fields if f]

    def search(self, query: str) -> list[MovieRecord]:
        """Return movies matching the query, best match first.

        Args:
            query: Free-text search term.

        Returns:
            Matching movies; equal scores keep catalog order.
            An empty query returns every movie unchanged.
        """
        if not query.strip():
            return list(self._movies)

        processed = utils.default_process(query)
        if not processed:
            return list(self._movies)

        scored: list[tuple[float, int]] = []
        for position, fields in enumerate(self._fields):
            best = max((similarity(processed, text) for text in fields), default=0.0)
            if best >= self._threshold and best > 0:
                scored.append((best, position))

        scored.sort(key=lambda item: -item[0])
        return [self._movies[position] for _score, position in scored]
