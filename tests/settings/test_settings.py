"""Tests for configuration sections."""

from datetime import date

import pytest
from pydantic import ValidationError

from trailerhub.settings import (
    CatalogSettings,
    IngestionSettings,
    LoggingSettings,
    SecuritySettings,
    Settings,
    TMDBSettings,
    get_masked_settings,
    settings,
)


class TestIngestionSettings:
    @staticmethod
    def test_defaults() -> None:
        cfg = IngestionSettings()
        assert cfg.target_count == 1000
        assert cfg.page_size == 20
        assert cfg.sort_strategies == ["popularity.desc", "vote_average.desc"]
        assert cfg.min_vote_count == 100
        assert cfg.include_adult is False
        assert cfg.min_release_date == date(1970, 1, 1)
        assert cfg.max_cast == 10
        assert cfg.max_crew == 15

    @staticmethod
    def test_page_budget() -> None:
        cfg = IngestionSettings()
        assert cfg.max_pages == 50
        assert cfg.pages_per_strategy == 25

    @staticmethod
    def test_page_budget_rounds_up() -> None:
        cfg = IngestionSettings(INGESTION_TARGET_COUNT=45, INGESTION_SORT_STRATEGIES="a,b")
        assert cfg.max_pages == 3
        assert cfg.pages_per_strategy == 2

    @staticmethod
    def test_crew_jobs() -> None:
        jobs = IngestionSettings().crew_jobs
        assert jobs == {"Director", "Writer", "Producer", "Executive Producer", "Screenplay", "Story"}

    @staticmethod
    def test_rejects_empty_strategies() -> None:
        with pytest.raises(ValidationError):
            IngestionSettings(INGESTION_SORT_STRATEGIES=" , ")

    @staticmethod
    def test_premium_ratio_bounds() -> None:
        with pytest.raises(ValidationError):
            IngestionSettings(INGESTION_PREMIUM_RATIO=1.5)


class TestCatalogSettings:
    @staticmethod
    def test_defaults() -> None:
        cfg = CatalogSettings()
        assert cfg.page_size == 15
        assert cfg.scroll_threshold == 1000
        assert cfg.recent_searches_limit == 5
        assert cfg.recent_searches_namespace == "recentSearches"


class TestTMDBSettings:
    @staticmethod
    def test_configured_from_env() -> None:
        assert TMDBSettings().is_configured

    @staticmethod
    def test_placeholder_key_is_not_configured() -> None:
        assert not TMDBSettings(TMDB_API_KEY="your_api_key_here").is_configured
        assert not TMDBSettings(TMDB_API_KEY="").is_configured

    @staticmethod
    def test_urls_lose_trailing_slash() -> None:
        cfg = TMDBSettings(TMDB_BASE_URL="https://tmdb.test/3/", TMDB_IMAGE_BASE_URL="https://img.test/w500/")
        assert cfg.base_url == "https://tmdb.test/3"
        assert cfg.image_base_url == "https://img.test/w500"

    @staticmethod
    def test_window_must_be_positive() -> None:
        with pytest.raises(ValidationError):
            TMDBSettings(TMDB_PERIOD_SECONDS=0)


class TestSecuritySettings:
    @staticmethod
    def test_demo_users_parsing() -> None:
        cfg = SecuritySettings(AUTH_DEMO_USERS="alice:secret1, bob:pa:ss")
        assert cfg.demo_users == {"alice": "secret1", "bob": "pa:ss"}

    @staticmethod
    def test_admin_users_parsing() -> None:
        cfg = SecuritySettings(ADMIN_USERS="ops, root ,")
        assert cfg.admin_users == {"ops", "root"}

    @staticmethod
    def test_short_secret_rejected() -> None:
        with pytest.raises(ValidationError):
            SecuritySettings(JWT_SECRET_KEY="short")


class TestLoggingSettings:
    @staticmethod
    def test_invalid_level() -> None:
        with pytest.raises(ValidationError):
            LoggingSettings(LOG_LEVEL="LOUD")

    @staticmethod
    def test_level_normalized() -> None:
        assert LoggingSettings(LOG_LEVEL=" debug ").level == "DEBUG"

    @staticmethod
    def test_relative_log_dir_is_anchored(tmp_path) -> None:
        assert LoggingSettings(LOG_DIR="logs").logs_dir.is_absolute()
        assert LoggingSettings(LOG_DIR=str(tmp_path)).logs_dir == tmp_path


class TestGlobalSettings:
    @staticmethod
    def test_environment_normalized() -> None:
        assert Settings(ENVIRONMENT="TEST").environment == "test"

    @staticmethod
    def test_invalid_environment() -> None:
        with pytest.raises(ValidationError):
            Settings(ENVIRONMENT="staging")

    @staticmethod
    def test_masked_settings_hide_secrets() -> None:
        masked = get_masked_settings()
        assert masked["tmdb"]["api_key"] == "***MASKED***"
        assert masked["security"]["jwt_secret_key"] == "***MASKED***"
        assert masked["database"]["url"] == "***MASKED***"
        assert settings.tmdb.api_key != "***MASKED***"
