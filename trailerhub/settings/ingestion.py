"""Catalog ingestion configuration settings.

Constants driving the full catalog refresh from TMDB.
"""

from datetime import date

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_CREW_JOBS = "Director,Writer,Producer,Executive Producer,Screenplay,Story"


class IngestionSettings(BaseSettings):
    """Catalog refresh parameters.

    Attributes:
        target_count: Maximum number of movies in a refreshed catalog.
        page_size: Number of results per TMDB discover page.
        sort_strategies_raw: Comma-separated TMDB ranking strategies.
        min_vote_count: Vote-count floor for discovered movies.
        include_adult: Whether adult titles may be discovered.
        min_release_date: Release-date floor for discovered movies.
        premium_ratio: Share of movies assigned the Premium tier.
        seed: Optional seed for tier and runtime assignment.
    """

    target_count: int = Field(default=1000, ge=1, alias="INGESTION_TARGET_COUNT")
    page_size: int = Field(default=20, ge=1, alias="INGESTION_PAGE_SIZE")
    sort_strategies_raw: str = Field(
        default="popularity.desc,vote_average.desc",
        alias="INGESTION_SORT_STRATEGIES",
    )
    min_vote_count: int = Field(default=100, ge=0, alias="INGESTION_MIN_VOTE_COUNT")
    include_adult: bool = Field(default=False, alias="INGESTION_INCLUDE_ADULT")
    min_release_date: date = Field(
        default=date(1970, 1, 1),
        alias="INGESTION_MIN_RELEASE_DATE",
    )

    # Courtesy delays (seconds) after each provider call
    discover_delay: float = Field(default=0.15, ge=0, alias="INGESTION_DISCOVER_DELAY")
    trailer_delay: float = Field(default=0.10, ge=0, alias="INGESTION_TRAILER_DELAY")
    credits_delay: float = Field(default=0.15, ge=0, alias="INGESTION_CREDITS_DELAY")

    # Credits
    max_cast: int = Field(default=10, ge=0, alias="INGESTION_MAX_CAST")
    max_crew: int = Field(default=15, ge=0, alias="INGESTION_MAX_CREW")
    crew_jobs_raw: str = Field(default=_DEFAULT_CREW_JOBS, alias="INGESTION_CREW_JOBS")

    # Trailer lookup
    trailer_site: str = Field(default="YouTube", alias="INGESTION_TRAILER_SITE")
    trailer_type: str = Field(default="Trailer", alias="INGESTION_TRAILER_TYPE")
    watch_url_prefix: str = Field(
        default="https://www.youtube.com/watch?v=",
        alias="INGESTION_WATCH_URL_PREFIX",
    )

    # Demo data policy
    premium_ratio: float = Field(default=0.3, ge=0, le=1, alias="INGESTION_PREMIUM_RATIO")
    runtime_min: int = Field(default=90, ge=1, alias="INGESTION_RUNTIME_MIN")
    runtime_max: int = Field(default=150, ge=1, alias="INGESTION_RUNTIME_MAX")
    seed: int | None = Field(default=None, alias="INGESTION_SEED")

    # Progress logging
    movie_log_interval: int = Field(default=50, ge=1, alias="INGESTION_MOVIE_LOG_INTERVAL")
    credits_log_interval: int = Field(default=25, ge=1, alias="INGESTION_CREDITS_LOG_INTERVAL")

    # Key for pg_try_advisory_lock
    lock_key: int = Field(default=72_656_564, alias="INGESTION_LOCK_KEY")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("sort_strategies_raw")
    @classmethod
    def validate_strategies(cls, v: str) -> str:
        """Require at least one ranking strategy."""
        if not [s for s in v.split(",") if s.strip()]:
            raise ValueError("INGESTION_SORT_STRATEGIES must name at least one strategy")
        return v

    @property
    def sort_strategies(self) -> list[str]:
        """Ranking strategies in fetch order."""
        return [s.strip() for s in self.sort_strategies_raw.split(",") if s.strip()]

    @property
    def crew_jobs(self) -> frozenset[str]:
        """Crew job titles kept during credits ingestion."""
        return frozenset(j.strip() for j in self.crew_jobs_raw.split(",") if j.strip())

    @property
    def max_pages(self) -> int:
        """Provider pages needed to cover the target count."""
        return -(-self.target_count // self.page_size)

    @property
    def pages_per_strategy(self) -> int:
        """Even share of pages for each ranking strategy."""
        return -(-self.max_pages // len(self.sort_strategies))
