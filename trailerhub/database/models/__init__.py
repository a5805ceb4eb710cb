"""SQLAlchemy ORM models for the TrailerHub catalog store.

Usage:
    from trailerhub.database.models import Base, Movie, CastMember

Tables:
    - movies: Catalog items
    - cast_members: Billed actors per movie
    - crew_members: Key crew per movie
    - watchlist: Saved movies per user
    - user_ratings: Star ratings per user
    - viewing_history: Plays per user
    - subscribers: Subscription state (read-only here)
"""

from trailerhub.database.models.base import (
    Base,
    CreatedAtMixin,
    TimestampMixin,
    UUIDPrimaryKeyMixin,
)
from trailerhub.database.models.movie import (
    SUBSCRIPTION_TIERS,
    CastMember,
    CrewMember,
    Movie,
)
from trailerhub.database.models.user import (
    Subscriber,
    UserRating,
    ViewingHistory,
    WatchlistEntry,
)

__all__ = [
    # Base
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "UUIDPrimaryKeyMixin",
    # Catalog
    "SUBSCRIPTION_TIERS",
    "Movie",
    "CastMember",
    "CrewMember",
    # User data
    "WatchlistEntry",
    "UserRating",
    "ViewingHistory",
    "Subscriber",
]
