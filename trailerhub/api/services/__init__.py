"""API services."""

from trailerhub.api.services.jwt_service import (
    InvalidTokenError,
    JWTService,
    TokenExpiredError,
    TokenPayload,
    get_jwt_service,
)

__all__ = ["JWTService", "TokenPayload", "TokenExpiredError", "InvalidTokenError", "get_jwt_service"]
