"""Tests for authentication endpoints and guards."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from fastapi.testclient import TestClient

from trailerhub.api.services.jwt_service import InvalidTokenError, JWTService
from trailerhub.settings import SecuritySettings


class TestToken:
    @staticmethod
    def test_demo_user_gets_token(client: TestClient) -> None:
        response = client.post(
            "/api/v1/auth/token",
            json={"username": "viewer", "password": "viewer-pass-123"},
        )
        body = response.json()
        assert response.status_code == 200
        assert body["token_type"] == "bearer"
        assert body["expires_in"] == 30 * 60

    @staticmethod
    def test_wrong_password(client: TestClient) -> None:
        response = client.post(
            "/api/v1/auth/token",
            json={"username": "viewer", "password": "not-the-password"},
        )
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    @staticmethod
    def test_register_then_login(client: TestClient) -> None:
        created = client.post(
            "/api/v1/auth/register",
            json={"username": "newcomer", "password": "long-enough-1"},
        )
        assert created.status_code in (201, 409)

        response = client.post(
            "/api/v1/auth/token",
            json={"username": "newcomer", "password": "long-enough-1"},
        )
        assert response.status_code == 200

    @staticmethod
    def test_register_taken_username(client: TestClient) -> None:
        response = client.post(
            "/api/v1/auth/register",
            json={"username": "viewer", "password": "whatever-123"},
        )
        assert response.status_code == 409


class TestGuards:
    @staticmethod
    def test_missing_token(client: TestClient) -> None:
        response = client.get("/api/v1/watchlist")
        assert response.status_code in (401, 403)

    @staticmethod
    def test_garbage_token(client: TestClient) -> None:
        response = client.get("/api/v1/watchlist", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid authentication token"

    @staticmethod
    def test_expired_token(client: TestClient) -> None:
        service = JWTService(
            SecuritySettings(
                JWT_SECRET_KEY="test_jwt_secret_key_12345678901234567890",
                JWT_EXPIRE_MINUTES=-1,
            )
        )
        headers = {"Authorization": f"Bearer {service.create_token('viewer')}"}
        response = client.get("/api/v1/watchlist", headers=headers)
        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"


class TestJWTService:
    SECRET = "test_jwt_secret_key_12345678901234567890"

    @staticmethod
    def test_token_names_viewer_and_expiry() -> None:
        service = JWTService()
        issued = datetime.now(UTC).replace(microsecond=0)

        payload = service.decode_token(service.create_token("viewer", issued_at=issued))

        assert payload.sub == "viewer"
        assert payload.expires_at == issued + timedelta(minutes=30)

    @staticmethod
    def test_foreign_issuer_rejected() -> None:
        token = jwt.encode(
            {"sub": "viewer", "iss": "elsewhere", "exp": datetime.now(UTC) + timedelta(minutes=5)},
            TestJWTService.SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            JWTService().decode_token(token)

    @staticmethod
    def test_blank_subject_rejected() -> None:
        token = jwt.encode(
            {"sub": " ", "iss": "trailerhub", "exp": datetime.now(UTC) + timedelta(minutes=5)},
            TestJWTService.SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError, match="no viewer"):
            JWTService().decode_token(token)
