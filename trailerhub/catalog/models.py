"""In-memory catalog item used by the query engine."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from trailerhub.database.models import Movie


def _parse_datetime(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _optional_float(value: Any) -> float | None:
    return None if value is None else float(value)


@dataclass(frozen=True)
class MovieRecord:
    """Read-only view of a catalog movie.

    Attributes:
        id: Opaque unique identifier.
        title: Display title.
        description: Synopsis.
        genre: Genre labels, in display order.
        rating: Provider score on a 0-10 scale.
        release_year: Year of first release.
        duration_minutes: Runtime.
        subscription_tier: "Basic" or "Premium".
    """

    id: str
    title: str
    description: str | None = None
    genre: tuple[str, ...] = ()
    rating: float | None = None
    release_year: int | None = None
    duration_minutes: int | None = None
    poster_url: str | None = None
    trailer_url: str | None = None
    subscription_tier: str = "Basic"
    created_at: datetime | None = field(default=None, compare=False)
    updated_at: datetime | None = field(default=None, compare=False)

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "MovieRecord":
        """Build a record from a movie object of the HTTP API."""
        return cls(
            id=str(payload["id"]),
            title=payload["title"],
            description=payload.get("description"),
            genre=tuple(payload.get("genre") or ()),
            rating=_optional_float(payload.get("rating")),
            release_year=payload.get("release_year"),
            duration_minutes=payload.get("duration_minutes"),
            poster_url=payload.get("poster_url"),
            trailer_url=payload.get("trailer_url"),
            subscription_tier=payload.get("subscription_tier") or "Basic",
            created_at=_parse_datetime(payload.get("created_at")),
            updated_at=_parse_datetime(payload.get("updated_at")),
        )

    @classmethod
    def from_orm(cls, movie: Movie) -> "MovieRecord":
        """Build a record from a stored movie."""
        return cls(
            id=str(movie.id),
            title=movie.title,
            description=movie.description,
            genre=tuple(movie.genre or ()),
            rating=_optional_float(movie.rating),
            release_year=movie.release_year,
            duration_minutes=movie.duration_minutes,
            poster_url=movie.poster_url,
            trailer_url=movie.trailer_url,
            subscription_tier=movie.subscription_tier,
            created_at=movie.created_at,
            updated_at=movie.updated_at,
        )
