"""Repositories for catalog store access."""

from trailerhub.database.repositories.base import BaseRepository
from trailerhub.database.repositories.credit import CastRepository, CrewRepository
from trailerhub.database.repositories.movie import (
    ORDERABLE_FIELDS,
    MovieFilter,
    MovieRepository,
)
from trailerhub.database.repositories.user import (
    SubscriberRepository,
    UserRatingRepository,
    ViewingHistoryRepository,
    WatchlistRepository,
    purge_catalog,
)

__all__ = [
    "BaseRepository",
    "MovieRepository",
    "MovieFilter",
    "ORDERABLE_FIELDS",
    "CastRepository",
    "CrewRepository",
    "WatchlistRepository",
    "UserRatingRepository",
    "ViewingHistoryRepository",
    "SubscriberRepository",
    "purge_catalog",
]
