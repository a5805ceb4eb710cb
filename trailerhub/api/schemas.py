"""Pydantic schemas for API request/response validation.

Defines data transfer objects for movies, user library data,
authentication, and the ingestion trigger.
"""

from datetime import UTC, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# HEALTH
# =============================================================================


class DatabaseComponentHealth(BaseModel):
    """Database connection status."""

    connected: bool = False
    pool_available: int | None = None


class TMDBComponentHealth(BaseModel):
    """Metadata provider configuration status."""

    configured: bool = False


class HealthComponents(BaseModel):
    """Health status of each system component."""

    database: DatabaseComponentHealth = Field(default_factory=DatabaseComponentHealth)
    tmdb: TMDBComponentHealth = Field(default_factory=TMDBComponentHealth)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(examples=["healthy"])
    version: str = Field(examples=["1.0.0"])
    components: HealthComponents = Field(default_factory=HealthComponents)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


# =============================================================================
# AUTHENTICATION
# =============================================================================


class TokenRequest(BaseModel):
    """Login credentials."""

    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=8, max_length=100)


class TokenResponse(BaseModel):
    """JWT token response."""

    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int = Field(description="Token lifetime in seconds")


class RegisterRequest(BaseModel):
    """User registration request."""

    username: str = Field(min_length=3, max_length=50, pattern=r"^[a-zA-Z0-9_-]+$")
    password: str = Field(min_length=8, max_length=100)


class RegisterResponse(BaseModel):
    """User registration response."""

    username: str
    message: str


# =============================================================================
# PAGINATION
# =============================================================================


class PaginationParams(BaseModel):
    """Pagination query parameters."""

    page: int = Field(default=1, ge=1, le=1000)
    size: int = Field(default=15, ge=1, le=100)

    @property
    def offset(self) -> int:
        """Calculate SQL offset from page number."""
        return (self.page - 1) * self.size


class PaginatedMeta(BaseModel):
    """Pagination metadata for list responses."""

    page: int
    size: int
    total: int
    pages: int

    @classmethod
    def from_params(
        cls,
        params: PaginationParams,
        total: int,
    ) -> "PaginatedMeta":
        """Build meta from pagination params and total count."""
        pages = (total + params.size - 1) // params.size if total > 0 else 0
        return cls(
            page=params.page,
            size=params.size,
            total=total,
            pages=pages,
        )


# =============================================================================
# MOVIE SCHEMAS
# =============================================================================


class MovieBase(BaseModel):
    """Catalog movie as listed."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str | None = None
    genre: list[str] = Field(default_factory=list)
    rating: float | None = None
    release_year: int | None = None
    duration_minutes: int | None = None
    poster_url: str | None = None
    trailer_url: str | None = None
    subscription_tier: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CastMemberOut(BaseModel):
    """Credited actor."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    character_name: str | None = None
    profile_picture_url: str | None = None
    order_position: int


class CrewMemberOut(BaseModel):
    """Credited crew member."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    job: str
    department: str | None = None
    profile_picture_url: str | None = None


class MovieDetail(MovieBase):
    """Catalog movie with credits."""

    cast: list[CastMemberOut] = Field(default_factory=list)
    crew: list[CrewMemberOut] = Field(default_factory=list)


class MovieListResponse(BaseModel):
    """Paginated movie list response."""

    data: list[MovieBase]
    meta: PaginatedMeta


class PlayResponse(BaseModel):
    """Playback grant for a movie."""

    movie_id: UUID
    trailer_url: str | None = None
    video_url: str | None = None


# =============================================================================
# USER LIBRARY SCHEMAS
# =============================================================================


class WatchlistItem(BaseModel):
    """Watchlist entry with its movie."""

    model_config = ConfigDict(from_attributes=True)

    movie_id: UUID
    created_at: datetime | None = None
    movie: MovieBase


class RatingRequest(BaseModel):
    """Personal rating of a movie."""

    rating: int = Field(ge=1, le=5)


class RatingResponse(BaseModel):
    """Stored personal rating."""

    model_config = ConfigDict(from_attributes=True)

    movie_id: UUID
    rating: int


class AccountStats(BaseModel):
    """Counts of a user's library."""

    watchlist: int
    ratings: int
    watched: int
    subscribed: bool
    subscription_tier: str | None = None


# =============================================================================
# INGESTION
# =============================================================================


class PopulateResponse(BaseModel):
    """Successful catalog refresh."""

    success: bool = True
    message: str
    movies: int
    cast: int
    crew: int
