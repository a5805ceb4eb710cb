"""Catalog browsing configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    """Query engine parameters.

    Attributes:
        page_size: Movies fetched per remote page.
        scroll_threshold: Distance from the bottom that triggers a load.
        fuzzy_threshold: Minimum similarity (0-100) for a fuzzy hit.
        recent_searches_limit: Number of recent searches kept.
        recent_searches_file: File name of the recent-search store.
    """

    page_size: int = Field(default=15, ge=1, alias="CATALOG_PAGE_SIZE")
    scroll_threshold: int = Field(default=1000, ge=0, alias="CATALOG_SCROLL_THRESHOLD")
    fuzzy_threshold: float = Field(default=70.0, ge=0, le=100, alias="CATALOG_FUZZY_THRESHOLD")

    suggestion_min_length: int = Field(default=2, ge=1, alias="CATALOG_SUGGESTION_MIN_LENGTH")
    title_suggestions: int = Field(default=5, ge=0, alias="CATALOG_TITLE_SUGGESTIONS")
    genre_suggestions: int = Field(default=3, ge=0, alias="CATALOG_GENRE_SUGGESTIONS")

    recent_searches_limit: int = Field(default=5, ge=1, alias="CATALOG_RECENT_SEARCHES_LIMIT")
    recent_searches_namespace: str = Field(
        default="recentSearches",
        alias="CATALOG_RECENT_SEARCHES_NAMESPACE",
    )
    recent_searches_file: str = Field(
        default="client_state.json",
        alias="CATALOG_RECENT_SEARCHES_FILE",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
