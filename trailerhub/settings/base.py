"""Paths and logging settings shared by every TrailerHub component."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def anchored(path: Path) -> Path:
    """Resolve a relative path against the project root."""
    return path if path.is_absolute() else PROJECT_ROOT / path


class PathsSettings(BaseSettings):
    """Local state directories.

    Attributes:
        data_root: Client-side state such as recent searches.
    """

    data_root: Path = Field(default=Path("data"), alias="TRAILERHUB_DATA_DIR")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def data_dir(self) -> Path:
        return anchored(self.data_root)

    def ensure_directories(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)


class LoggingSettings(BaseSettings):
    """Log output of the refresh job and the API.

    Attributes:
        level: One of LOG_LEVELS.
        log_dir: Directory of the dated log files.
        to_file: Whether loggers also write a dated file next to stdout.
    """

    level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: Path = Field(default=Path("logs"), alias="LOG_DIR")
    to_file: bool = Field(default=True, alias="LOG_TO_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def logs_dir(self) -> Path:
        return anchored(self.log_dir)
