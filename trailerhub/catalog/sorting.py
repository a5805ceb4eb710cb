"""Single-key catalog ordering."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from trailerhub.catalog.models import MovieRecord

SORT_KEYS = ("title", "release_year", "rating", "duration_minutes", "created_at")
ASCENDING = "asc"
DESCENDING = "desc"


def _title_key(movie: MovieRecord) -> Any:
    return movie.title.casefold()


def _created_key(movie: MovieRecord) -> Any:
    return None if movie.created_at is None else movie.created_at.timestamp()


_KEY_FUNCS: dict[str, Callable[[MovieRecord], Any]] = {
    "title": _title_key,
    "release_year": lambda m: m.release_year,
    "rating": lambda m: m.rating,
    "duration_minutes": lambda m: m.duration_minutes,
    "created_at": _created_key,
}


@dataclass(frozen=True)
class SortSpec:
    """Sort key and direction of a catalog view."""

    key: str = "release_year"
    direction: str = DESCENDING

    def __post_init__(self) -> None:
        if self.key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key {self.key!r}; expected one of {SORT_KEYS}")
        if self.direction not in (ASCENDING, DESCENDING):
            raise ValueError(f"Unknown sort direction {self.direction!r}")

    @property
    def ascending(self) -> bool:
        return self.direction == ASCENDING

    def reversed(self) -> "SortSpec":
        """Same key, opposite direction."""
        return SortSpec(self.key, DESCENDING if self.ascending else ASCENDING)


def sort_movies(movies: Iterable[MovieRecord], spec: SortSpec) -> list[MovieRecord]:
    """Order movies by one key.

    Missing values sort as the smallest value. The sort is stable in
    both directions, so equal keys keep their input order.

    Args:
        movies: Movies to order.
        spec: Key and direction.

    Returns:
        New ordered list.
    """
    key_func = _KEY_FUNCS[spec.key]

    def key(movie: MovieRecord) -> tuple[bool, Any]:
        value = key_func(movie)
        return (value is not None, value if value is not None else 0)

    return sorted(movies, key=key, reverse=not spec.ascending)
