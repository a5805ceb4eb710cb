"""Tests for health, metrics and rate limiting."""

from fastapi.testclient import TestClient

from trailerhub.api.dependencies.rate_limit import RateLimiter, get_rate_limiter


class TestHealth:
    @staticmethod
    def test_healthy(client: TestClient) -> None:
        body = client.get("/api/v1/health").json()
        assert body["status"] == "healthy"
        assert body["components"]["database"]["connected"] is True
        assert body["components"]["tmdb"]["configured"] is True


class TestMetricsEndpoint:
    @staticmethod
    def test_exposes_http_metrics(client: TestClient) -> None:
        client.get("/api/v1/health")
        response = client.get("/metrics/")
        assert response.status_code == 200
        assert "trailerhub_http_requests_total" in response.text


class TestRateLimiter:
    @staticmethod
    def test_bucket_empties_then_waits() -> None:
        limiter = RateLimiter(2)
        assert limiter.acquire("1.2.3.4") == 0
        assert limiter.acquire("1.2.3.4") == 0
        assert limiter.acquire("1.2.3.4") > 0
        assert limiter.acquire("5.6.7.8") == 0

    @staticmethod
    def test_remaining_and_reset() -> None:
        limiter = RateLimiter(5)
        limiter.acquire("a")
        assert limiter.remaining("a") == 4
        limiter.reset()
        assert limiter.remaining("a") == 5

    @staticmethod
    def test_429_with_retry_after(client: TestClient) -> None:
        limiter = get_rate_limiter()
        headers = {"X-Forwarded-For": "203.0.113.9"}
        for _ in range(int(limiter.capacity)):
            limiter.acquire("203.0.113.9")

        response = client.get("/api/v1/movies", headers=headers)

        assert response.status_code == 429
        assert int(response.headers["Retry-After"]) >= 1
