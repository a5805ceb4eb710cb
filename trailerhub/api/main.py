"""FastAPI application entry point.

Creates and configures the TrailerHub REST API with
authentication, rate limiting, and OpenAPI documentation.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from trailerhub.api.dependencies.rate_limit import check_rate_limit
from trailerhub.api.routers import account, admin, movies, ratings, watchlist
from trailerhub.api.schemas import (
    DatabaseComponentHealth,
    HealthComponents,
    HealthResponse,
    RegisterRequest,
    RegisterResponse,
    TMDBComponentHealth,
    TokenRequest,
    TokenResponse,
)
from trailerhub.api.services.jwt_service import JWTService, get_jwt_service
from trailerhub.database import get_engine, init_schema
from trailerhub.etl.utils import setup_logger
from trailerhub.monitoring import PrometheusMiddleware, mount_metrics
from trailerhub.settings import settings

logger = setup_logger("api.main")

# =============================================================================
# LIFESPAN
# =============================================================================


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Creates missing tables on startup.
    """
    init_schema()
    logger.info(f"{settings.api.title} started ({settings.environment})")
    yield


# =============================================================================
# APPLICATION FACTORY
# =============================================================================


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance.
    """
    app = FastAPI(
        title=settings.api.title,
        version=settings.api.version,
        description="REST API for the TrailerHub movie catalog",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    _configure_cors(app)
    app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)
    _register_routers(app)
    return app


def _configure_cors(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )


def _register_routers(app: FastAPI) -> None:
    for module in (movies, watchlist, ratings, account, admin):
        app.include_router(module.router, prefix="/api/v1")


# =============================================================================
# ROOT ENDPOINTS
# =============================================================================

app = create_app()


@app.get(
    "/api/v1/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check",
    description="Verify API is running and responsive.",
)
def health_check() -> HealthResponse:
    """Health check endpoint (no authentication required)."""
    database = _check_database()
    return HealthResponse(
        status="healthy" if database.connected else "degraded",
        version=settings.api.version,
        components=HealthComponents(
            database=database,
            tmdb=TMDBComponentHealth(configured=settings.tmdb.is_configured),
        ),
    )


def _check_database() -> DatabaseComponentHealth:
    """Check database connection status."""
    try:
        engine = get_engine()
        with engine.connect() as conn:
            conn.exec_driver_sql("SELECT 1")
    except SQLAlchemyError as e:
        logger.warning(f"Database health check failed: {e}")
        return DatabaseComponentHealth(connected=False)
    pool = engine.pool
    pool_available = pool.checkedin() if hasattr(pool, "checkedin") else None
    return DatabaseComponentHealth(connected=True, pool_available=pool_available)


@app.post(
    "/api/v1/auth/token",
    response_model=TokenResponse,
    tags=["Authentication"],
    summary="Get access token",
    description="Authenticate and receive JWT token.",
    dependencies=[Depends(check_rate_limit)],
)
def login(
    request: TokenRequest,
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
) -> TokenResponse:
    """Authenticate user and return JWT token.

    Raises:
        HTTPException: 401 if credentials invalid.
    """
    if not _validate_credentials(request.username, request.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = jwt_service.create_token(subject=request.username)
    return TokenResponse(
        access_token=token,
        expires_in=jwt_service.expire_seconds,
    )


def _validate_credentials(username: str, password: str) -> bool:
    """Validate user credentials against demo and registered users."""
    if settings.security.demo_users.get(username) == password:
        return True
    return _registered_users.get(username) == password


# =============================================================================
# REGISTRATION
# =============================================================================

_registered_users: dict[str, str] = {}


@app.post(
    "/api/v1/auth/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Authentication"],
    summary="Register new user",
    description="Create a new user account.",
    dependencies=[Depends(check_rate_limit)],
)
def register(request: RegisterRequest) -> RegisterResponse:
    """Register a new user.

    Raises:
        HTTPException: 409 if username already taken.
    """
    if request.username in settings.security.demo_users or request.username in _registered_users:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already taken",
        )
    _registered_users[request.username] = request.password
    return RegisterResponse(
        username=request.username,
        message="User registered successfully",
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "trailerhub.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )
