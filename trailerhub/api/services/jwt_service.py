"""Bearer tokens for TrailerHub viewers.

A token names the viewer whose watchlist, ratings and viewing history
a request acts on. Only the subject and expiry are read back; admin
rights come from ADMIN_USERS, never from a claim.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import ExpiredSignatureError, PyJWTError

from trailerhub.settings import SecuritySettings, settings

ISSUER = "trailerhub"


@dataclass(frozen=True)
class TokenPayload:
    """Viewer identity carried by a valid token.

    Attributes:
        sub: Username, also the user_id of library rows.
        expires_at: When the token stops being accepted.
    """

    sub: str
    expires_at: datetime


class TokenError(Exception):
    """Base exception for rejected tokens."""


class TokenExpiredError(TokenError):
    pass


class InvalidTokenError(TokenError):
    pass


class JWTService:
    """Issues and verifies viewer tokens with the configured secret."""

    def __init__(self, config: SecuritySettings | None = None) -> None:
        self._config = config or settings.security

    @property
    def lifetime(self) -> timedelta:
        return timedelta(minutes=self._config.jwt_expire_minutes)

    @property
    def expire_seconds(self) -> int:
        return int(self.lifetime.total_seconds())

    def create_token(self, subject: str, issued_at: datetime | None = None) -> str:
        """Sign a token for a viewer.

        Args:
            subject: Username.
            issued_at: Issue time, now when omitted.

        Returns:
            Encoded JWT string.
        """
        issued = issued_at or datetime.now(UTC)
        claims = {
            "sub": subject,
            "iss": ISSUER,
            "iat": issued,
            "exp": issued + self.lifetime,
        }
        return jwt.encode(claims, self._config.jwt_secret_key, algorithm=self._config.jwt_algorithm)

    def decode_token(self, token: str) -> TokenPayload:
        """Verify a token and return the viewer it names.

        Raises:
            TokenExpiredError: If the token is past its expiry.
            InvalidTokenError: If the signature, issuer or subject is wrong.
        """
        try:
            claims = jwt.decode(
                token,
                self._config.jwt_secret_key,
                algorithms=[self._config.jwt_algorithm],
                issuer=ISSUER,
                options={"require": ["sub", "exp"]},
            )
        except ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except PyJWTError as e:
            raise InvalidTokenError("Invalid token") from e

        subject = claims["sub"]
        if not isinstance(subject, str) or not subject.strip():
            raise InvalidTokenError("Token names no viewer")
        return TokenPayload(sub=subject, expires_at=datetime.fromtimestamp(claims["exp"], tz=UTC))


def get_jwt_service() -> JWTService:
    return JWTService()
