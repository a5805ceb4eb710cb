"""Catalog models: movies and their cast and crew.

The ingestion pipeline is the only writer of these tables; it replaces
them wholesale on every refresh.
"""

import uuid

from sqlalchemy import (
    JSON,
    CheckConstraint,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trailerhub.database.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

SUBSCRIPTION_TIERS = ("Basic", "Premium")


class Movie(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A catalog item.

    Attributes:
        id: Primary key.
        tmdb_id: Provider identifier, used to attach credits after insert.
        title: Movie title.
        description: Synopsis.
        genre: Ordered list of genre labels.
        rating: Provider score on a 0-10 scale.
        subscription_tier: 'Basic' or 'Premium'.
    """

    __tablename__ = "movies"

    tmdb_id: Mapped[int | None] = mapped_column(Integer, unique=True, index=True)

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    genre: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    release_year: Mapped[int | None] = mapped_column(Integer, index=True)
    duration_minutes: Mapped[int | None] = mapped_column(Integer)
    rating: Mapped[float | None] = mapped_column(Numeric(3, 1, asdecimal=False))

    # Media URLs
    poster_url: Mapped[str | None] = mapped_column(Text)
    trailer_url: Mapped[str | None] = mapped_column(Text)
    video_url: Mapped[str | None] = mapped_column(Text)

    subscription_tier: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="Basic",
    )

    cast_members: Mapped[list["CastMember"]] = relationship(
        back_populates="movie",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="CastMember.order_position",
    )
    crew_members: Mapped[list["CrewMember"]] = relationship(
        back_populates="movie",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="CrewMember.job",
    )

    __table_args__ = (
        CheckConstraint(
            "subscription_tier IN ('Basic', 'Premium')",
            name="chk_subscription_tier",
        ),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<Movie(id={self.id}, title='{self.title}', tier='{self.subscription_tier}')>"


class CastMember(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Actor credited on a movie, in billing order."""

    __tablename__ = "cast_members"

    movie_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tmdb_person_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    character_name: Mapped[str | None] = mapped_column(String(500))
    profile_picture_url: Mapped[str | None] = mapped_column(Text)
    order_position: Mapped[int] = mapped_column(Integer, default=0)

    movie: Mapped[Movie] = relationship(back_populates="cast_members")

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<CastMember(name='{self.name}', order={self.order_position})>"


class CrewMember(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Key crew member (director, writer, producer...) of a movie."""

    __tablename__ = "crew_members"

    movie_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tmdb_person_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    job: Mapped[str] = mapped_column(String(100), nullable=False)
    department: Mapped[str | None] = mapped_column(String(100))
    profile_picture_url: Mapped[str | None] = mapped_column(Text)

    movie: Mapped[Movie] = relationship(back_populates="crew_members")

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<CrewMember(name='{self.name}', job='{self.job}')>"
