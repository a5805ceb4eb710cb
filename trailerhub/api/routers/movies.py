"""Movie endpoints for REST API.

Range-paginated catalog reads in any sort order, movie details with
credits, and playback guarded by the subscription access rule.
"""

from datetime import UTC, datetime
from typing import Annotated, Literal
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from trailerhub.api.dependencies.auth import CurrentUser
from trailerhub.api.dependencies.rate_limit import check_rate_limit
from trailerhub.api.schemas import (
    CastMemberOut,
    CrewMemberOut,
    MovieBase,
    MovieDetail,
    MovieListResponse,
    PaginatedMeta,
    PaginationParams,
    PlayResponse,
)
from trailerhub.catalog import has_access
from trailerhub.database import (
    Movie,
    MovieFilter,
    MovieRepository,
    Subscriber,
    SubscriberRepository,
    ViewingHistoryRepository,
    get_db,
)

router = APIRouter(
    prefix="/movies",
    tags=["Movies"],
    dependencies=[Depends(check_rate_limit)],
)

OrderField = Literal["title", "release_year", "rating", "duration_minutes", "created_at"]


# =============================================================================
# DEPENDENCIES
# =============================================================================


def get_pagination(
    page: Annotated[int, Query(ge=1, le=1000)] = 1,
    size: Annotated[int, Query(ge=1, le=100)] = 15,
) -> PaginationParams:
    """Parse and validate pagination parameters."""
    return PaginationParams(page=page, size=size)


def get_movie_filter(
    genre: Annotated[str | None, Query(max_length=50)] = None,
    tier: Annotated[Literal["Basic", "Premium"] | None, Query()] = None,
    year_min: Annotated[int | None, Query(ge=1800, le=3000)] = None,
    year_max: Annotated[int | None, Query(ge=1800, le=3000)] = None,
    rating_min: Annotated[float | None, Query(ge=0, le=10)] = None,
    rating_max: Annotated[float | None, Query(ge=0, le=10)] = None,
) -> MovieFilter:
    """Parse equality and range constraints."""
    return MovieFilter(
        genre=genre,
        subscription_tier=tier,
        year_min=year_min,
        year_max=year_max,
        rating_min=rating_min,
        rating_max=rating_max,
    )


def subscription_state(subscriber: Subscriber | None) -> tuple[bool, str | None]:
    """Whether a subscription row is active, and its tier."""
    if subscriber is None or not subscriber.subscribed:
        return False, None
    end = subscriber.subscription_end
    if end is not None:
        if end.tzinfo is None:
            end = end.replace(tzinfo=UTC)
        if end < datetime.now(UTC):
            return False, None
    return True, subscriber.subscription_tier


def _get_movie_or_404(repo: MovieRepository, movie_id: UUID, with_credits: bool = False) -> Movie:
    movie = repo.get_with_credits(movie_id) if with_credits else repo.get_by_id(movie_id)
    if movie is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Movie with id {movie_id} not found",
        )
    return movie


# =============================================================================
# ENDPOINTS
# =============================================================================


@router.get(
    "",
    response_model=MovieListResponse,
    summary="List movies",
    description="Range-paginated catalog read ordered by any sort key.",
)
def list_movies(
    db: Annotated[Session, Depends(get_db)],
    pagination: Annotated[PaginationParams, Depends(get_pagination)],
    movie_filter: Annotated[MovieFilter, Depends(get_movie_filter)],
    order_by: OrderField = "release_year",
    ascending: bool = False,
) -> MovieListResponse:
    """Get one page of the catalog.

    Returns:
        Movies of the page with pagination metadata.
    """
    repo = MovieRepository(db)
    movies = repo.get_page(
        offset=pagination.offset,
        limit=pagination.size,
        order_by=order_by,
        ascending=ascending,
        movie_filter=movie_filter,
    )
    return MovieListResponse(
        data=[MovieBase.model_validate(m) for m in movies],
        meta=PaginatedMeta.from_params(pagination, repo.count_filtered(movie_filter)),
    )


@router.get(
    "/{movie_id}",
    response_model=MovieDetail,
    summary="Get movie details",
    description="Movie with cast (billing order) and crew (by job).",
)
def get_movie(
    movie_id: UUID,
    db: Annotated[Session, Depends(get_db)],
) -> MovieDetail:
    """Get movie by ID.

    Raises:
        HTTPException: 404 if movie not found.
    """
    movie = _get_movie_or_404(MovieRepository(db), movie_id, with_credits=True)
    return MovieDetail(
        **MovieBase.model_validate(movie).model_dump(),
        cast=[CastMemberOut.model_validate(c) for c in movie.cast_members],
        crew=[CrewMemberOut.model_validate(c) for c in movie.crew_members],
    )


@router.post(
    "/{movie_id}/play",
    response_model=PlayResponse,
    summary="Play a movie",
    description="Check the subscription and record a viewing-history entry.",
)
def play_movie(
    movie_id: UUID,
    user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> PlayResponse:
    """Grant playback of a movie.

    Raises:
        HTTPException: 404 if movie not found, 403 if the subscription
            does not cover the movie's tier.
    """
    movie = _get_movie_or_404(MovieRepository(db), movie_id)
    subscribed, tier = subscription_state(SubscriberRepository(db).get_for_user(user.sub))

    if not has_access(subscribed, tier, movie.subscription_tier):
        detail = (
            "An active subscription is required"
            if not subscribed
            else f"The {movie.subscription_tier} tier is required to play this movie"
        )
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)

    ViewingHistoryRepository(db).record_play(user.sub, movie.id)
    return PlayResponse(movie_id=movie.id, trailer_url=movie.trailer_url, video_url=movie.video_url)
