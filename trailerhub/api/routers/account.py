"""Account summary endpoint for REST API."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from trailerhub.api.dependencies.auth import CurrentUser
from trailerhub.api.dependencies.rate_limit import check_rate_limit
from trailerhub.api.routers.movies import subscription_state
from trailerhub.api.schemas import AccountStats
from trailerhub.database import (
    SubscriberRepository,
    UserRatingRepository,
    ViewingHistoryRepository,
    WatchlistRepository,
    get_db,
)

router = APIRouter(
    prefix="/account",
    tags=["Account"],
    dependencies=[Depends(check_rate_limit)],
)


@router.get("/stats", response_model=AccountStats, summary="Library counts")
def account_stats(
    user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> AccountStats:
    """Count the current user's watchlist, ratings and watched movies."""
    subscribed, tier = subscription_state(SubscriberRepository(db).get_for_user(user.sub))
    return AccountStats(
        watchlist=WatchlistRepository(db).count(user_id=user.sub),
        ratings=UserRatingRepository(db).count(user_id=user.sub),
        watched=ViewingHistoryRepository(db).count(user_id=user.sub),
        subscribed=subscribed,
        subscription_tier=tier,
    )
