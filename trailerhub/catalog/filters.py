"""Catalog filter predicates.

Every filter is an independent predicate; a movie passes when all
active predicates hold. Unbounded ranges, an empty genre set and the
"all" tier are inactive and never reject anything.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from trailerhub.catalog.models import MovieRecord

TIER_ALL = "all"
TIER_CHOICES = (TIER_ALL, "Basic", "Premium")


@dataclass(frozen=True)
class ValueRange:
    """Inclusive numeric range, either bound optional."""

    min: float | None = None
    max: float | None = None

    def __post_init__(self) -> None:
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"Range minimum {self.min} exceeds maximum {self.max}")

    @property
    def is_active(self) -> bool:
        return self.min is not None or self.max is not None

    def contains(self, value: float | None) -> bool:
        """Check a value against the bounds.

        A missing value only passes an inactive range.
        """
        if not self.is_active:
            return True
        if value is None:
            return False
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True

    def label(self) -> str:
        low = "" if self.min is None else f"{self.min:g}"
        high = "" if self.max is None else f"{self.max:g}"
        return f"{low}-{high}"


@dataclass(frozen=True)
class CatalogFilters:
    """Structured constraints of a catalog view.

    Attributes:
        genres: Selected genre labels (OR-combined).
        year: Release-year range.
        rating: Rating range (0-10).
        duration: Runtime range in minutes.
        tier: "all", "Basic" or "Premium".
    """

    genres: frozenset[str] = field(default_factory=frozenset)
    year: ValueRange = field(default_factory=ValueRange)
    rating: ValueRange = field(default_factory=ValueRange)
    duration: ValueRange = field(default_factory=ValueRange)
    tier: str = TIER_ALL

    def __post_init__(self) -> None:
        if self.tier not in TIER_CHOICES:
            raise ValueError(f"Unknown tier filter {self.tier!r}; expected one of {TIER_CHOICES}")
        if not isinstance(self.genres, frozenset):
            object.__setattr__(self, "genres", frozenset(self.genres))

    def matches_genre(self, movie: MovieRecord) -> bool:
        return not self.genres or any(g in self.genres for g in movie.genre)

    def matches_tier(self, movie: MovieRecord) -> bool:
        return self.tier == TIER_ALL or movie.subscription_tier == self.tier

    def matches(self, movie: MovieRecord) -> bool:
        """Evaluate every predicate against one movie."""
        return (
            self.matches_genre(movie)
            and self.year.contains(movie.release_year)
            and self.rating.contains(movie.rating)
            and self.duration.contains(movie.duration_minutes)
            and self.matches_tier(movie)
        )

    def apply(self, movies: Iterable[MovieRecord]) -> list[MovieRecord]:
        """Keep matching movies, preserving input order."""
        return [movie for movie in movies if self.matches(movie)]

    @property
    def is_default(self) -> bool:
        return not (
            self.genres
            or self.year.is_active
            or self.rating.is_active
            or self.duration.is_active
            or self.tier != TIER_ALL
        )
