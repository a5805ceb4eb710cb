"""Personal rating endpoints for REST API."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from trailerhub.api.dependencies.auth import CurrentUser
from trailerhub.api.dependencies.rate_limit import check_rate_limit
from trailerhub.api.schemas import RatingRequest, RatingResponse
from trailerhub.database import MovieRepository, UserRatingRepository, get_db

router = APIRouter(
    prefix="/ratings",
    tags=["Ratings"],
    dependencies=[Depends(check_rate_limit)],
)


@router.get("", response_model=list[RatingResponse], summary="List my ratings")
def list_ratings(
    user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> list[RatingResponse]:
    """Get every rating of the current user."""
    ratings = UserRatingRepository(db).for_user(user.sub)
    return [RatingResponse(movie_id=movie_id, rating=value) for movie_id, value in ratings.items()]


@router.put("/{movie_id}", response_model=RatingResponse, summary="Rate a movie")
def rate_movie(
    movie_id: UUID,
    request: RatingRequest,
    user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> RatingResponse:
    """Create or replace the current user's 1-5 rating of a movie.

    Raises:
        HTTPException: 404 if movie not found.
    """
    if MovieRepository(db).get_by_id(movie_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Movie with id {movie_id} not found",
        )
    rating = UserRatingRepository(db).upsert(user.sub, movie_id, request.rating)
    return RatingResponse.model_validate(rating)
