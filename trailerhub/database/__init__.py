"""Database package for TrailerHub.

Provides connection management, ORM models, repositories and the
catalog refresh lock.

Usage:
    from trailerhub.database import session_scope, MovieRepository

    with session_scope() as session:
        movies = MovieRepository(session).get_page(0, 15)
"""

from trailerhub.database.connection import (
    build_engine,
    check_connection,
    get_db,
    get_engine,
    get_session_factory,
    init_schema,
    make_session_factory,
    session_scope,
)
from trailerhub.database.lock import CatalogLockHeldError, CatalogRefreshLock
from trailerhub.database.models import (
    Base,
    CastMember,
    CrewMember,
    Movie,
    Subscriber,
    UserRating,
    ViewingHistory,
    WatchlistEntry,
)
from trailerhub.database.repositories import (
    CastRepository,
    CrewRepository,
    MovieFilter,
    MovieRepository,
    SubscriberRepository,
    UserRatingRepository,
    ViewingHistoryRepository,
    WatchlistRepository,
    purge_catalog,
)

__all__ = [
    # Connection
    "build_engine",
    "check_connection",
    "get_db",
    "get_engine",
    "get_session_factory",
    "init_schema",
    "make_session_factory",
    "session_scope",
    # Lock
    "CatalogRefreshLock",
    "CatalogLockHeldError",
    # Models
    "Base",
    "Movie",
    "CastMember",
    "CrewMember",
    "WatchlistEntry",
    "UserRating",
    "ViewingHistory",
    "Subscriber",
    # Repositories
    "MovieRepository",
    "MovieFilter",
    "CastRepository",
    "CrewRepository",
    "WatchlistRepository",
    "UserRatingRepository",
    "ViewingHistoryRepository",
    "SubscriberRepository",
    "purge_catalog",
]
