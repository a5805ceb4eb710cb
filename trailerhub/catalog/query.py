"""Catalog views: search, filter and sort in one pass.

Also holds the quick filter presets of the browsing page.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field, replace
from datetime import date

from trailerhub.catalog.filters import CatalogFilters, ValueRange
from trailerhub.catalog.models import MovieRecord
from trailerhub.catalog.search import FuzzyIndex
from trailerhub.catalog.sorting import DESCENDING, SortSpec, sort_movies


@dataclass(frozen=True)
class CatalogQuery:
    """User-specified view of the loaded catalog.

    Attributes:
        search: Free-text term; blank means no text narrowing.
        filters: Structured predicates.
        sort: Ordering of the result.
        quick_filter: Name of the applied preset, if any.
    """

    search: str = ""
    filters: CatalogFilters = field(default_factory=CatalogFilters)
    sort: SortSpec = field(default_factory=SortSpec)
    quick_filter: str | None = None


def run_query(
    movies: Sequence[MovieRecord],
    query: CatalogQuery,
    index: FuzzyIndex | None = None,
) -> list[MovieRecord]:
    """Produce the ordered view of a catalog slice.

    The search term narrows the candidates first, the filters are then
    applied to what is left, and the survivors are sorted.

    Args:
        movies: Loaded movies.
        query: View definition.
        index: Prebuilt fuzzy index over the same movies.

    Returns:
        Filtered and sorted movies.
    """
    candidates: Sequence[MovieRecord] = movies
    if query.search.strip():
        candidates = (index or FuzzyIndex(movies)).search(query.search)
    return sort_movies(query.filters.apply(candidates), query.sort)


def available_genres(movies: Iterable[MovieRecord]) -> list[str]:
    """Distinct genre labels in order of first appearance."""
    return list(dict.fromkeys(genre for movie in movies for genre in movie.genre))


def active_filters(query: CatalogQuery) -> list[tuple[str, str]]:
    """Describe the active constraints as (kind, label) tags."""
    tags: list[tuple[str, str]] = []
    if query.search:
        tags.append(("search", f'Search: "{query.search}"'))
    tags.extend(("genre", genre) for genre in sorted(query.filters.genres))
    if query.filters.tier != "all":
        tags.append(("subscription", f"{query.filters.tier} Tier"))
    if query.filters.year.is_active:
        tags.append(("year", query.filters.year.label()))
    if query.filters.rating.is_active:
        tags.append(("rating", f"Rating: {query.filters.rating.label()}"))
    if query.filters.duration.is_active:
        tags.append(("duration", f"Duration: {query.filters.duration.label()}"))
    if query.quick_filter:
        tags.append(("quick", QUICK_FILTER_LABELS[query.quick_filter]))
    return tags


# =============================================================================
# QUICK FILTERS
# =============================================================================


def _new_releases(query: CatalogQuery, year: int) -> CatalogQuery:
    filters = replace(query.filters, year=ValueRange(year - 1, year))
    return replace(query, filters=filters, sort=SortSpec("created_at", DESCENDING))


def _top_rated(query: CatalogQuery, _year: int) -> CatalogQuery:
    filters = replace(query.filters, rating=ValueRange(8, 10))
    return replace(query, filters=filters, sort=SortSpec("rating", DESCENDING))


def _trending(query: CatalogQuery, year: int) -> CatalogQuery:
    filters = replace(query.filters, year=ValueRange(year - 3, year))
    return replace(query, filters=filters, sort=SortSpec("rating", DESCENDING))


def _classics(query: CatalogQuery, _year: int) -> CatalogQuery:
    filters = replace(query.filters, year=ValueRange(1970, 2000), rating=ValueRange(7, 10))
    return replace(query, filters=filters, sort=SortSpec("rating", DESCENDING))


QUICK_FILTERS: dict[str, Callable[[CatalogQuery, int], CatalogQuery]] = {
    "new-releases": _new_releases,
    "top-rated": _top_rated,
    "trending": _trending,
    "classics": _classics,
}

QUICK_FILTER_LABELS = {
    "new-releases": "New Releases",
    "top-rated": "Top Rated",
    "trending": "Trending",
    "classics": "Classics",
}


def apply_quick_filter(
    query: CatalogQuery,
    name: str,
    today: date | None = None,
) -> CatalogQuery:
    """Apply a preset on top of an existing query.

    Args:
        query: Current query.
        name: Preset name (see QUICK_FILTERS).
        today: Reference date for relative year ranges.

    Returns:
        New query with the preset's ranges and sort.

    Raises:
        KeyError: If the preset is unknown.
    """
    preset = QUICK_FILTERS[name]
    year = (today or date.today()).year
    return replace(preset(query, year), quick_filter=name)


def clear_quick_filter(query: CatalogQuery) -> CatalogQuery:
    """Drop the preset's year and rating ranges and restore the default sort."""
    filters = replace(query.filters, year=ValueRange(), rating=ValueRange())
    return replace(query, filters=filters, sort=SortSpec(), quick_filter=None)
