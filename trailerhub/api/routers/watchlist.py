"""Watchlist endpoints for REST API."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from trailerhub.api.dependencies.auth import CurrentUser
from trailerhub.api.dependencies.rate_limit import check_rate_limit
from trailerhub.api.schemas import WatchlistItem
from trailerhub.database import MovieRepository, WatchlistRepository, get_db

router = APIRouter(
    prefix="/watchlist",
    tags=["Watchlist"],
    dependencies=[Depends(check_rate_limit)],
)


@router.get("", response_model=list[WatchlistItem], summary="List watchlist")
def list_watchlist(
    user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> list[WatchlistItem]:
    """Get the current user's watchlist, most recent first."""
    return [WatchlistItem.model_validate(e) for e in WatchlistRepository(db).for_user(user.sub)]


@router.post(
    "/{movie_id}",
    response_model=WatchlistItem,
    status_code=status.HTTP_201_CREATED,
    summary="Add to watchlist",
)
def add_to_watchlist(
    movie_id: UUID,
    user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> WatchlistItem:
    """Add a movie to the watchlist; adding twice keeps one entry.

    Raises:
        HTTPException: 404 if movie not found.
    """
    if MovieRepository(db).get_by_id(movie_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Movie with id {movie_id} not found",
        )
    entry = WatchlistRepository(db).add(user.sub, movie_id)
    return WatchlistItem.model_validate(entry)


@router.delete(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove from watchlist",
)
def remove_from_watchlist(
    movie_id: UUID,
    user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Remove a movie from the watchlist.

    Raises:
        HTTPException: 404 if the movie is not on the watchlist.
    """
    if not WatchlistRepository(db).remove(user.sub, movie_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Movie is not on the watchlist",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
