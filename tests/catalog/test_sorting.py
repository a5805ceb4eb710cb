"""Tests for catalog ordering."""

import pytest

from trailerhub.catalog import ASCENDING, DESCENDING, SortSpec, sort_movies


def ids(movies) -> list[str]:
    return [m.id for m in movies]


class TestSortSpec:
    @staticmethod
    def test_defaults() -> None:
        spec = SortSpec()
        assert (spec.key, spec.direction) == ("release_year", DESCENDING)
        assert spec.ascending is False

    @staticmethod
    def test_reversed() -> None:
        assert SortSpec("rating", ASCENDING).reversed() == SortSpec("rating", DESCENDING)

    @staticmethod
    def test_invalid_values() -> None:
        with pytest.raises(ValueError):
            SortSpec("popularity")
        with pytest.raises(ValueError):
            SortSpec("rating", "up")


class TestSortMovies:
    @staticmethod
    def test_rating_descending_missing_last(movies) -> None:
        assert ids(sort_movies(movies, SortSpec("rating", DESCENDING))) == ["1", "2", "3", "5", "4"]

    @staticmethod
    def test_rating_ascending_missing_first(movies) -> None:
        assert ids(sort_movies(movies, SortSpec("rating", ASCENDING))) == ["4", "5", "3", "2", "1"]

    @staticmethod
    def test_title_ignores_case(make_record) -> None:
        movies = [make_record("1", "beta"), make_record("2", "Alpha"), make_record("3", "Gamma")]
        assert ids(sort_movies(movies, SortSpec("title", ASCENDING))) == ["2", "1", "3"]

    @staticmethod
    def test_created_at(movies) -> None:
        assert ids(sort_movies(movies, SortSpec("created_at", DESCENDING))) == ["5", "1", "3", "2", "4"]

    @staticmethod
    def test_reverse_is_mirror_when_keys_distinct(movies) -> None:
        spec = SortSpec("duration_minutes", ASCENDING)
        assert sort_movies(movies, spec) == list(reversed(sort_movies(movies, spec.reversed())))

    @staticmethod
    @pytest.mark.parametrize("direction", [ASCENDING, DESCENDING])
    def test_stable_for_equal_keys(make_record, direction) -> None:
        movies = [make_record(str(i), f"Movie {i}", rating=7.0) for i in range(5)]
        assert ids(sort_movies(movies, SortSpec("rating", direction))) == ["0", "1", "2", "3", "4"]

    @staticmethod
    def test_does_not_mutate_input(movies) -> None:
        before = list(movies)
        sort_movies(movies, SortSpec("title", ASCENDING))
        assert movies == before
