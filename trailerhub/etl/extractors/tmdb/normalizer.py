"""TMDB data normalizer.

Transforms raw TMDB API responses into catalog rows
ready for database insertion.
"""

import logging
import random
from collections.abc import Iterable, Sequence
from typing import Any

from trailerhub.etl.types import (
    NormalizedCastData,
    NormalizedCrewData,
    NormalizedMovieData,
    TMDBCastData,
    TMDBCrewData,
    TMDBMovieData,
)
from trailerhub.settings import IngestionSettings, TMDBSettings, settings

logger = logging.getLogger(__name__)

# TMDB movie genre codes
GENRE_NAMES: dict[int, str] = {
    28: "Action",
    12: "Adventure",
    16: "Animation",
    35: "Comedy",
    80: "Crime",
    99: "Documentary",
    18: "Drama",
    10751: "Family",
    14: "Fantasy",
    36: "History",
    27: "Horror",
    10402: "Music",
    9648: "Mystery",
    10749: "Romance",
    878: "Science Fiction",
    10770: "TV Movie",
    53: "Thriller",
    10752: "War",
    37: "Western",
}

DEFAULT_GENRE = "Action"
UNKNOWN_GENRE = "Drama"


def genre_name(genre_ids: Sequence[int] | None) -> str:
    """Map the first genre code of a movie to its label.

    Args:
        genre_ids: TMDB genre codes, possibly absent.

    Returns:
        "Action" when no code is given, "Drama" for an unknown code.
    """
    if not genre_ids:
        return DEFAULT_GENRE
    return GENRE_NAMES.get(genre_ids[0], UNKNOWN_GENRE)


class TMDBNormalizer:
    """Normalizes TMDB API data for database insertion.

    Tier and runtime are demo placeholders drawn from the random
    generator passed in, so a seeded generator gives reproducible rows.
    """

    BASIC = "Basic"
    PREMIUM = "Premium"

    def __init__(
        self,
        config: IngestionSettings | None = None,
        tmdb_config: TMDBSettings | None = None,
    ) -> None:
        self._config = config or settings.ingestion
        self._image_base_url = (tmdb_config or settings.tmdb).image_base_url

    # -------------------------------------------------------------------------
    # Movie Normalization
    # -------------------------------------------------------------------------

    def normalize_movie(
        self,
        raw: TMDBMovieData,
        trailer_url: str | None,
        rng: random.Random,
    ) -> NormalizedMovieData:
        """Normalize a TMDB discover entry to a catalog row.

        Args:
            raw: Raw TMDB movie data.
            trailer_url: Resolved trailer URL, if any.
            rng: Source of the demo tier and runtime.

        Returns:
            Normalized movie data.
        """
        return NormalizedMovieData(
            tmdb_id=raw["id"],
            title=self._clean_string(raw["title"]) or raw["title"],
            description=self._clean_string(raw.get("overview")),
            genre=[genre_name(raw.get("genre_ids"))],
            rating=self._round_rating(raw.get("vote_average")),
            release_year=self._parse_year(raw.get("release_date")),
            duration_minutes=self.pick_runtime(rng),
            poster_url=self.image_url(raw.get("poster_path")),
            trailer_url=trailer_url,
            video_url=None,
            subscription_tier=self.pick_tier(rng),
        )

    def normalize_movies(
        self,
        items: Iterable[tuple[TMDBMovieData, str | None]],
        rng: random.Random,
    ) -> list[NormalizedMovieData]:
        """Normalize (movie, trailer_url) pairs, skipping malformed entries."""
        normalized = []
        for raw, trailer_url in items:
            try:
                normalized.append(self.normalize_movie(raw, trailer_url, rng))
            except (KeyError, TypeError, AttributeError) as e:
                logger.warning(f"Failed to normalize movie {raw.get('id')}: {e}")
        return normalized

    def pick_tier(self, rng: random.Random) -> str:
        """Draw the access tier, Premium for roughly premium_ratio of calls."""
        return self.PREMIUM if rng.random() > 1 - self._config.premium_ratio else self.BASIC

    def pick_runtime(self, rng: random.Random) -> int:
        """Draw a synthetic runtime within the configured bounds."""
        low = self._config.runtime_min
        return rng.randint(low, max(low, self._config.runtime_max))

    # -------------------------------------------------------------------------
    # Credits Normalization
    # -------------------------------------------------------------------------

    def normalize_cast(self, cast: Sequence[TMDBCastData]) -> list[NormalizedCastData]:
        """Keep the first actors of the billing list.

        Args:
            cast: Raw cast data.

        Returns:
            At most max_cast entries with order_position 0..n-1.
        """
        return [
            NormalizedCastData(
                tmdb_person_id=member["id"],
                name=member["name"],
                character_name=member.get("character") or None,
                profile_picture_url=self.image_url(member.get("profile_path")),
                order_position=position,
            )
            for position, member in enumerate(cast[: self._config.max_cast])
        ]

    def normalize_crew(self, crew: Sequence[TMDBCrewData]) -> list[NormalizedCrewData]:
        """Keep key creative roles only.

        Args:
            crew: Raw crew data.

        Returns:
            At most max_crew entries whose job is in the allow-list.
        """
        jobs = self._config.crew_jobs
        kept = [member for member in crew if member.get("job") in jobs]
        return [
            NormalizedCrewData(
                tmdb_person_id=member["id"],
                name=member["name"],
                job=member["job"],
                department=member.get("department"),
                profile_picture_url=self.image_url(member.get("profile_path")),
            )
            for member in kept[: self._config.max_crew]
        ]

    # -------------------------------------------------------------------------
    # Trailer Selection
    # -------------------------------------------------------------------------

    def select_trailer(self, videos: Iterable[dict[str, Any]]) -> str | None:
        """Pick the first video matching the trailer type and site.

        Args:
            videos: Entries of a /videos listing.

        Returns:
            Watch URL of the trailer, or None.
        """
        for video in videos:
            if not isinstance(video, dict):
                continue
            if (
                video.get("type") == self._config.trailer_type
                and video.get("site") == self._config.trailer_site
                and video.get("key")
            ):
                return f"{self._config.watch_url_prefix}{video['key']}"
        return None

    # -------------------------------------------------------------------------
    # Helper Methods
    # -------------------------------------------------------------------------

    def image_url(self, path: str | None) -> str | None:
        """Build a CDN URL from a TMDB image path."""
        if not path:
            return None
        return f"{self._image_base_url}{path}"

    @staticmethod
    def _clean_string(value: str | None) -> str | None:
        """Clean and validate string value."""
        if not value:
            return None
        cleaned = value.strip()
        return cleaned if cleaned else None

    @staticmethod
    def _round_rating(value: float | None) -> float | None:
        """Round a vote average to one decimal, zero meaning unrated."""
        if not value:
            return None
        return round(float(value), 1)

    @staticmethod
    def _parse_year(value: str | None) -> int | None:
        """Extract the year of an ISO date string."""
        if not value or len(value) < 4:
            return None
        try:
            return int(value[:4])
        except ValueError:
            logger.debug(f"Invalid release date: {value}")
            return None
