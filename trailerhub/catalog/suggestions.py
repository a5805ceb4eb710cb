"""Typeahead suggestions and the recent-search history."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from trailerhub.catalog.models import MovieRecord
from trailerhub.catalog.query import available_genres
from trailerhub.settings import CatalogSettings, settings

logger = logging.getLogger(__name__)


def build_suggestions(
    term: str,
    movies: Sequence[MovieRecord],
    config: CatalogSettings | None = None,
) -> list[str]:
    """Suggest titles and genre labels containing the typed text.

    Matching is case-insensitive substring containment. A title is
    suggested when the title or one of the movie's genres contains the
    text.

    Args:
        term: Text typed so far.
        movies: Loaded movies.
        config: Catalog settings (caps and minimum length).

    Returns:
        Up to the title cap of titles followed by up to the genre cap
        of genres, without repeats. Empty for input that is too short.
    """
    cfg = config or settings.catalog
    if len(term) < cfg.suggestion_min_length:
        return []

    needle = term.lower()
    titles = [
        movie.title
        for movie in movies
        if needle in movie.title.lower() or any(needle in g.lower() for g in movie.genre)
    ][: cfg.title_suggestions]
    genres = [g for g in available_genres(movies) if needle in g.lower()][: cfg.genre_suggestions]

    return list(dict.fromkeys([*titles, *genres]))


class RecentSearches:
    """Capped most-recent-first search history persisted as JSON.

    The history lives under a namespace key of a small JSON document,
    so other client state can share the file.

    Example:
        ```python
        recent = RecentSearches()
        recent.add("matrix")
        recent.items  # ["matrix", ...]
        ```
    """

    def __init__(
        self,
        path: Path | None = None,
        limit: int | None = None,
        namespace: str | None = None,
    ) -> None:
        cfg = settings.catalog
        self._path = path or settings.paths.data_dir / cfg.recent_searches_file
        self._limit = limit or cfg.recent_searches_limit
        self._namespace = namespace or cfg.recent_searches_namespace
        self._items = self._read()

    @property
    def items(self) -> list[str]:
        return list(self._items)

    def add(self, term: str) -> list[str]:
        """Record a submitted search.

        Blank terms are ignored. The term moves to the front and exact
        duplicates are dropped.

        Returns:
            Updated history.
        """
        if not term.strip():
            return self.items
        self._items = [term, *(s for s in self._items if s != term)][: self._limit]
        self._write()
        return self.items

    def clear(self) -> None:
        self._items = []
        self._write()

    def _read_document(self) -> dict[str, object]:
        if not self._path.exists():
            return {}
        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable client state {self._path}: {e}")
            return {}
        return document if isinstance(document, dict) else {}

    def _read(self) -> list[str]:
        saved = self._read_document().get(self._namespace)
        if not isinstance(saved, list):
            return []
        return [s for s in saved if isinstance(s, str)][: self._limit]

    def _write(self) -> None:
        document = self._read_document()
        document[self._namespace] = self._items
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(document, indent=2), encoding="utf-8")
