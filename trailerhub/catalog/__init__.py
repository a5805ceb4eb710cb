"""Catalog query engine.

Filters, fuzzy-searches, sorts and incrementally loads the catalog
for browsing.

Usage:
    from trailerhub.catalog import CatalogQuery, CatalogFilters, ValueRange, run_query

    query = CatalogQuery(search="matrix", filters=CatalogFilters(rating=ValueRange(8, 10)))
    view = run_query(movies, query)
"""

from trailerhub.catalog.access import has_access
from trailerhub.catalog.filters import TIER_ALL, TIER_CHOICES, CatalogFilters, ValueRange
from trailerhub.catalog.models import MovieRecord
from trailerhub.catalog.pager import ApiPageSource, CatalogPager, PageFetchError, PageSource
from trailerhub.catalog.query import (
    QUICK_FILTER_LABELS,
    QUICK_FILTERS,
    CatalogQuery,
    active_filters,
    apply_quick_filter,
    available_genres,
    clear_quick_filter,
    run_query,
)
from trailerhub.catalog.search import FuzzyIndex
from trailerhub.catalog.sorting import ASCENDING, DESCENDING, SORT_KEYS, SortSpec, sort_movies
from trailerhub.catalog.suggestions import RecentSearches, build_suggestions

__all__ = [
    "MovieRecord",
    "ValueRange",
    "CatalogFilters",
    "TIER_ALL",
    "TIER_CHOICES",
    "FuzzyIndex",
    "SortSpec",
    "SORT_KEYS",
    "ASCENDING",
    "DESCENDING",
    "sort_movies",
    "CatalogQuery",
    "run_query",
    "available_genres",
    "active_filters",
    "QUICK_FILTERS",
    "QUICK_FILTER_LABELS",
    "apply_quick_filter",
    "clear_quick_filter",
    "CatalogPager",
    "PageSource",
    "ApiPageSource",
    "PageFetchError",
    "build_suggestions",
    "RecentSearches",
    "has_access",
]
