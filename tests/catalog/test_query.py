"""Tests for catalog views and quick filters."""

from datetime import date

import pytest

from trailerhub.catalog import (
    ASCENDING,
    DESCENDING,
    CatalogFilters,
    CatalogQuery,
    FuzzyIndex,
    SortSpec,
    ValueRange,
    active_filters,
    apply_quick_filter,
    available_genres,
    clear_quick_filter,
    run_query,
)

TODAY = date(2025, 5, 1)


def ids(movies) -> list[str]:
    return [m.id for m in movies]


class TestRunQuery:
    @staticmethod
    def test_default_query_sorts_by_year_descending(movies) -> None:
        assert ids(run_query(movies, CatalogQuery())) == ["1", "5", "3", "2", "4"]

    @staticmethod
    def test_search_then_filter(movies) -> None:
        query = CatalogQuery(search="matrix", filters=CatalogFilters(tier="Premium"))
        assert ids(run_query(movies, query)) == ["5"]

    @staticmethod
    def test_search_results_are_sorted(movies) -> None:
        query = CatalogQuery(search="matrix", sort=SortSpec("rating", ASCENDING))
        assert ids(run_query(movies, query)) == ["5", "2"]

    @staticmethod
    def test_prebuilt_index(movies) -> None:
        index = FuzzyIndex(movies)
        query = CatalogQuery(search="inception")
        assert ids(run_query(movies, query, index=index)) == ["1"]

    @staticmethod
    def test_no_match(movies) -> None:
        query = CatalogQuery(filters=CatalogFilters(rating=ValueRange(9.5, 10)))
        assert run_query(movies, query) == []


class TestDerivedViews:
    @staticmethod
    def test_available_genres_in_first_appearance_order(movies) -> None:
        assert available_genres(movies) == [
            "Science Fiction",
            "Action",
            "Comedy",
            "Romance",
            "Documentary",
        ]

    @staticmethod
    def test_active_filters(movies) -> None:
        query = CatalogQuery(
            search="matrix",
            filters=CatalogFilters(
                genres={"Action"},
                tier="Premium",
                rating=ValueRange(8, 10),
            ),
        )
        assert active_filters(query) == [
            ("search", 'Search: "matrix"'),
            ("genre", "Action"),
            ("subscription", "Premium Tier"),
            ("rating", "Rating: 8-10"),
        ]

    @staticmethod
    def test_no_active_filters() -> None:
        assert active_filters(CatalogQuery()) == []


class TestQuickFilters:
    @staticmethod
    def test_top_rated(movies) -> None:
        query = apply_quick_filter(CatalogQuery(), "top-rated", today=TODAY)
        assert query.filters.rating == ValueRange(8, 10)
        assert query.sort == SortSpec("rating", DESCENDING)
        assert query.quick_filter == "top-rated"
        assert ids(run_query(movies, query)) == ["1", "2"]

    @staticmethod
    def test_classics(movies) -> None:
        query = apply_quick_filter(CatalogQuery(), "classics", today=TODAY)
        assert query.filters.year == ValueRange(1970, 2000)
        assert query.filters.rating == ValueRange(7, 10)
        assert ids(run_query(movies, query)) == ["2"]

    @staticmethod
    def test_new_releases_relative_to_today() -> None:
        query = apply_quick_filter(CatalogQuery(), "new-releases", today=TODAY)
        assert query.filters.year == ValueRange(2024, 2025)
        assert query.sort == SortSpec("created_at", DESCENDING)

    @staticmethod
    def test_trending() -> None:
        query = apply_quick_filter(CatalogQuery(), "trending", today=TODAY)
        assert query.filters.year == ValueRange(2022, 2025)
        assert query.sort == SortSpec("rating", DESCENDING)

    @staticmethod
    def test_keeps_other_constraints() -> None:
        base = CatalogQuery(search="space", filters=CatalogFilters(genres={"Drama"}, tier="Basic"))
        query = apply_quick_filter(base, "top-rated", today=TODAY)
        assert query.search == "space"
        assert query.filters.genres == frozenset({"Drama"})
        assert query.filters.tier == "Basic"
        assert base.filters.rating == ValueRange()

    @staticmethod
    def test_clear_restores_defaults() -> None:
        base = CatalogQuery(filters=CatalogFilters(genres={"Drama"}))
        cleared = clear_quick_filter(apply_quick_filter(base, "classics", today=TODAY))
        assert cleared == base

    @staticmethod
    def test_unknown_preset() -> None:
        with pytest.raises(KeyError):
            apply_quick_filter(CatalogQuery(), "oscars")

    @staticmethod
    def test_tag_shows_preset_label() -> None:
        query = apply_quick_filter(CatalogQuery(), "top-rated", today=TODAY)
        assert ("quick", "Top Rated") in active_filters(query)
