"""Authentication dependencies for FastAPI.

Provides dependency injection for JWT token validation,
current user extraction, and the operator check guarding
the catalog refresh.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from trailerhub.api.services.jwt_service import (
    InvalidTokenError,
    JWTService,
    TokenExpiredError,
    TokenPayload,
    get_jwt_service,
)
from trailerhub.settings import settings

# HTTPBearer extracts token from "Authorization: Bearer <token>" header
security_scheme = HTTPBearer(
    scheme_name="JWT",
    description="Enter JWT token obtained from /api/v1/auth/token",
    auto_error=True,
)


def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials,
        Depends(security_scheme),
    ],
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
) -> TokenPayload:
    """Extract and validate current user from JWT token.

    Raises:
        HTTPException: 401 if token is invalid or expired.
    """
    try:
        return jwt_service.decode_token(credentials.credentials)
    except TokenExpiredError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
            headers={"WWW-Authenticate": "Bearer"},
        ) from None
    except InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from None


CurrentUser = Annotated[TokenPayload, Depends(get_current_user)]


def require_admin(user: CurrentUser) -> TokenPayload:
    """Allow only operators listed in ADMIN_USERS.

    Raises:
        HTTPException: 403 for any other user.
    """
    if user.sub not in settings.security.admin_users:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Operator privileges required",
        )
    return user


AdminUser = Annotated[TokenPayload, Depends(require_admin)]
