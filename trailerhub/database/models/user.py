"""Per-user data attached to catalog items.

Watchlist entries, ratings and viewing history reference movies and are
purged along with them on every catalog refresh. Subscribers are written by
the external payment integration and only read here.
"""

import uuid
from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trailerhub.database.models.base import (
    Base,
    CreatedAtMixin,
    TimestampMixin,
    UUIDPrimaryKeyMixin,
)
from trailerhub.database.models.movie import Movie


class WatchlistEntry(Base, UUIDPrimaryKeyMixin, CreatedAtMixin):
    """Movie saved by a user for later."""

    __tablename__ = "watchlist"

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    movie_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
    )

    movie: Mapped[Movie] = relationship()

    __table_args__ = (UniqueConstraint("user_id", "movie_id", name="uq_watchlist_user_movie"),)


class UserRating(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Star rating (1-5) given by a user to a movie."""

    __tablename__ = "user_ratings"

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    movie_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "movie_id", name="uq_user_ratings_user_movie"),
        CheckConstraint("rating >= 1 AND rating <= 5", name="chk_rating_range"),
    )


class ViewingHistory(Base, UUIDPrimaryKeyMixin):
    """A play of a movie by a user."""

    __tablename__ = "viewing_history"

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    movie_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
    )
    watched_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    progress_seconds: Mapped[int] = mapped_column(Integer, default=0)
    completed: Mapped[bool] = mapped_column(Boolean, default=False)


class Subscriber(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Subscription state mirrored from the payment provider."""

    __tablename__ = "subscribers"

    user_id: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    subscribed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    subscription_tier: Mapped[str | None] = mapped_column(String(20))
    subscription_end: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    __table_args__ = (
        CheckConstraint(
            "subscription_tier IS NULL OR subscription_tier IN ('Basic', 'Premium')",
            name="chk_subscriber_tier",
        ),
    )
