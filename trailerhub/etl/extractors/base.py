"""Base extractor abstract class.

Provides common interface and utilities for ETL extractors.
"""

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime
from typing import Any

from trailerhub.etl.types import ETLResult


class BaseExtractor(ABC):
    """Abstract base class for ETL extractors.

    Provides common functionality for throttling, logging,
    and result tracking.

    Attributes:
        name: Extractor identifier (e.g., 'tmdb').
        logger: Logger instance for this extractor.
    """

    name: str = "base"

    def __init__(self, sleep: Callable[[float], None] = time.sleep) -> None:
        """Initialize base extractor.

        Args:
            sleep: Callable used for courtesy delays between calls.
        """
        self._logger = logging.getLogger(f"etl.{self.name}")
        self._sleep = sleep
        self._start_time: datetime | None = None
        self._extracted_count: int = 0
        self._errors: list[str] = []
        self.result: ETLResult | None = None

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger

    @property
    def errors(self) -> list[str]:
        """Errors recorded during the current extraction."""
        return list(self._errors)

    @abstractmethod
    def extract(self, *args: Any, **kwargs: Any) -> Any:
        """Execute the extraction process."""
        pass

    def _start_extraction(self) -> None:
        """Mark the start of extraction."""
        self._start_time = datetime.now()
        self._extracted_count = 0
        self._errors = []
        self.result = None
        self._logger.info(f"Starting {self.name} extraction")

    def _end_extraction(self) -> ETLResult:
        """Mark the end of extraction and store the result.

        Returns:
            ETLResult with final statistics.
        """
        duration = self._calculate_duration()

        self._logger.info(
            f"Completed {self.name} extraction: {self._extracted_count} items in {duration:.2f}s"
        )

        self.result = ETLResult(
            source=self.name,
            success=len(self._errors) == 0,
            count=self._extracted_count,
            errors=list(self._errors),
            duration_seconds=duration,
        )
        return self.result

    def _calculate_duration(self) -> float:
        """Calculate extraction duration in seconds."""
        if self._start_time is None:
            return 0.0
        delta = datetime.now() - self._start_time
        return delta.total_seconds()

    def _log_error(self, message: str) -> None:
        """Log and track an error.

        Args:
            message: Error message to log.
        """
        self._logger.error(message)
        self._errors.append(message)

    def _log_progress(self, current: int, total: int) -> None:
        """Log extraction progress."""
        if total > 0:
            percentage = (current / total) * 100
            self._logger.info(f"Progress: {current}/{total} ({percentage:.1f}%)")

    def _pause(self, seconds: float) -> None:
        """Courtesy delay between provider calls."""
        if seconds > 0:
            self._sleep(seconds)
