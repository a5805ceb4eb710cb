"""TMDB connection settings for the catalog refresh."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_KEYS = frozenset({"", "your_api_key_here", "changeme"})


class TMDBSettings(BaseSettings):
    """Where and how fast the refresh may call TMDB.

    The client keeps at most requests_per_period calls inside any
    period_seconds window, and spaces calls by min_request_delay.

    Attributes:
        api_key: v3 API key; the refresh refuses to start without one.
        base_url: REST root, without trailing slash.
        image_base_url: Poster and profile CDN root, without trailing slash.
        language: Locale of titles and overviews.
        timeout: Per-request timeout in seconds.
    """

    api_key: str = Field(default="", alias="TMDB_API_KEY")
    base_url: str = Field(default="https://api.themoviedb.org/3", alias="TMDB_BASE_URL")
    image_base_url: str = Field(default="https://image.tmdb.org/t/p/w500", alias="TMDB_IMAGE_BASE_URL")
    language: str = Field(default="en-US", alias="TMDB_LANGUAGE")
    timeout: float = Field(default=30.0, gt=0, alias="TMDB_TIMEOUT")
    user_agent: str = Field(default="TrailerHub-Ingestion/1.0", alias="USER_AGENT")

    requests_per_period: int = Field(default=40, ge=1, alias="TMDB_REQUESTS_PER_PERIOD")
    period_seconds: int = Field(default=10, ge=1, alias="TMDB_PERIOD_SECONDS")
    min_request_delay: float = Field(default=0.0, ge=0, alias="TMDB_MIN_REQUEST_DELAY")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("base_url", "image_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def is_configured(self) -> bool:
        """Whether a real API key is set."""
        return self.api_key.strip() not in PLACEHOLDER_KEYS
