"""Tests for watchlist, ratings and account endpoints."""

import uuid

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def movie_ids(seed_movies) -> list[uuid.UUID]:
    return seed_movies({"tmdb_id": 1, "title": "Alien"}, {"tmdb_id": 2, "title": "Heat"})


class TestWatchlist:
    @staticmethod
    def test_add_list_remove(client: TestClient, movie_ids, viewer_headers) -> None:
        added = client.post(f"/api/v1/watchlist/{movie_ids[1]}", headers=viewer_headers)
        assert added.status_code == 201
        assert added.json()["movie"]["title"] == "Heat"

        listed = client.get("/api/v1/watchlist", headers=viewer_headers).json()
        assert [item["movie_id"] for item in listed] == [str(movie_ids[1])]

        removed = client.delete(f"/api/v1/watchlist/{movie_ids[1]}", headers=viewer_headers)
        assert removed.status_code == 204
        assert client.get("/api/v1/watchlist", headers=viewer_headers).json() == []

    @staticmethod
    def test_add_twice_keeps_one_entry(client: TestClient, movie_ids, viewer_headers) -> None:
        client.post(f"/api/v1/watchlist/{movie_ids[0]}", headers=viewer_headers)
        client.post(f"/api/v1/watchlist/{movie_ids[0]}", headers=viewer_headers)
        assert len(client.get("/api/v1/watchlist", headers=viewer_headers).json()) == 1

    @staticmethod
    def test_unknown_movie(client: TestClient, viewer_headers) -> None:
        response = client.post(f"/api/v1/watchlist/{uuid.uuid4()}", headers=viewer_headers)
        assert response.status_code == 404

    @staticmethod
    def test_remove_missing_entry(client: TestClient, movie_ids, viewer_headers) -> None:
        response = client.delete(f"/api/v1/watchlist/{movie_ids[0]}", headers=viewer_headers)
        assert response.status_code == 404
        assert response.json()["detail"] == "Movie is not on the watchlist"

    @staticmethod
    def test_private_per_user(client: TestClient, movie_ids, viewer_headers, operator_headers) -> None:
        client.post(f"/api/v1/watchlist/{movie_ids[0]}", headers=viewer_headers)
        assert client.get("/api/v1/watchlist", headers=operator_headers).json() == []


class TestRatings:
    @staticmethod
    def test_rate_and_replace(client: TestClient, movie_ids, viewer_headers) -> None:
        first = client.put(f"/api/v1/ratings/{movie_ids[0]}", json={"rating": 2}, headers=viewer_headers)
        assert first.json() == {"movie_id": str(movie_ids[0]), "rating": 2}

        client.put(f"/api/v1/ratings/{movie_ids[0]}", json={"rating": 5}, headers=viewer_headers)
        listed = client.get("/api/v1/ratings", headers=viewer_headers).json()
        assert listed == [{"movie_id": str(movie_ids[0]), "rating": 5}]

    @staticmethod
    @pytest.mark.parametrize("value", [0, 6])
    def test_out_of_range(client: TestClient, movie_ids, viewer_headers, value) -> None:
        response = client.put(
            f"/api/v1/ratings/{movie_ids[0]}", json={"rating": value}, headers=viewer_headers
        )
        assert response.status_code == 422

    @staticmethod
    def test_unknown_movie(client: TestClient, viewer_headers) -> None:
        response = client.put(f"/api/v1/ratings/{uuid.uuid4()}", json={"rating": 3}, headers=viewer_headers)
        assert response.status_code == 404


class TestAccountStats:
    @staticmethod
    def test_counts(client: TestClient, movie_ids, viewer_headers, subscribe) -> None:
        subscribe("viewer", "Premium", days_left=None)
        client.post(f"/api/v1/watchlist/{movie_ids[0]}", headers=viewer_headers)
        client.post(f"/api/v1/watchlist/{movie_ids[1]}", headers=viewer_headers)
        client.put(f"/api/v1/ratings/{movie_ids[0]}", json={"rating": 4}, headers=viewer_headers)
        client.post(f"/api/v1/movies/{movie_ids[0]}/play", headers=viewer_headers)

        stats = client.get("/api/v1/account/stats", headers=viewer_headers).json()

        assert stats == {
            "watchlist": 2,
            "ratings": 1,
            "watched": 1,
            "subscribed": True,
            "subscription_tier": "Premium",
        }

    @staticmethod
    def test_empty_account(client: TestClient, viewer_headers) -> None:
        stats = client.get("/api/v1/account/stats", headers=viewer_headers).json()
        assert stats["watchlist"] == 0
        assert stats["subscribed"] is False
        assert stats["subscription_tier"] is None
