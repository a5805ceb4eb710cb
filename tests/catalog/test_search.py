"""Tests for fuzzy catalog search."""

import pytest

from trailerhub.catalog import FuzzyIndex
from trailerhub.catalog.search import similarity


def titles(movies) -> list[str]:
    return [m.title for m in movies]


class TestFuzzyIndex:
    @staticmethod
    def test_matches_partial_title(movies) -> None:
        hits = FuzzyIndex(movies).search("matrix")
        assert titles(hits) == ["The Matrix", "The Matrix Reloaded"]

    @staticmethod
    def test_tolerates_misspelling(movies) -> None:
        hits = FuzzyIndex(movies).search("matirx")
        assert "The Matrix" in titles(hits)
        assert "Inception" not in titles(hits)

    @staticmethod
    def test_case_insensitive(movies) -> None:
        assert titles(FuzzyIndex(movies).search("INCEPTION")) == ["Inception"]

    @staticmethod
    def test_matches_genre_label(movies) -> None:
        assert titles(FuzzyIndex(movies).search("romance")) == ["Amélie"]

    @staticmethod
    def test_matches_description(make_record) -> None:
        movie = make_record("9", "Heat", description="A heist crew in Los Angeles", genre=("Crime",))
        assert FuzzyIndex([movie]).search("heist") == [movie]

    @staticmethod
    def test_blank_query_returns_all(movies) -> None:
        assert FuzzyIndex(movies).search("   ") == movies

    @staticmethod
    def test_unrelated_query_returns_nothing(movies) -> None:
        assert FuzzyIndex(movies).search("zzzzqqq") == []

    @staticmethod
    def test_best_match_first(make_record) -> None:
        weaker = make_record("1", "Metropolis", genre=("Drama",))
        exact = make_record("2", "Matrix", genre=("Drama",))
        hits = FuzzyIndex([weaker, exact], threshold=50).search("matrix")
        assert hits[0] is exact

    @staticmethod
    def test_short_genre_inside_longer_query_is_not_a_hit(make_record) -> None:
        movie = make_record("9", "Heat", genre=("Action",))
        assert FuzzyIndex([movie]).search("inception") == []

    @staticmethod
    def test_genre_suffix_resembling_query_is_not_a_hit(make_record) -> None:
        movie = make_record("9", "Heat", genre=("Science Fiction",))
        assert FuzzyIndex([movie]).search("inception") == []


class TestSimilarity:
    @staticmethod
    def test_exact_substring_scores_full() -> None:
        assert similarity("matrix", "the matrix reloaded") == 100.0

    @staticmethod
    def test_transposition_is_one_edit() -> None:
        assert similarity("matirx", "the matrix") == pytest.approx(100 * 5 / 6)

    @staticmethod
    def test_shorter_field_is_compared_whole() -> None:
        assert similarity("inception", "action") < 70

    @staticmethod
    def test_empty_inputs_score_zero() -> None:
        assert similarity("", "matrix") == 0.0
        assert similarity("matrix", "") == 0.0
