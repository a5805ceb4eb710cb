"""Base loader abstract class.

Provides common interface and utilities for ETL loaders
writing into the catalog store.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from sqlalchemy.orm import Session, sessionmaker

from trailerhub.database import get_session_factory


@dataclass
class LoaderStats:
    """Statistics for a loader operation.

    Attributes:
        inserted: Number of new records inserted.
        deleted: Number of records deleted, keyed by table.
        errors: Number of failed writes.
        error_messages: List of error descriptions.
    """

    inserted: int = 0
    deleted: dict[str, int] = field(default_factory=dict)
    errors: int = 0
    error_messages: list[str] = field(default_factory=list)

    def record_error(self, message: str) -> None:
        """Count a failed write."""
        self.errors += 1
        self.error_messages.append(message)


class BaseLoader(ABC):
    """Abstract base class for catalog loaders.

    Attributes:
        name: Loader identifier for logging.
    """

    name: str = "base"

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        """Initialize loader.

        Args:
            session_factory: Factory for per-transaction sessions.
        """
        self._session_factory = session_factory or get_session_factory()
        self._logger = logging.getLogger(f"etl.loader.{self.name}")
        self._stats = LoaderStats()

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger

    @property
    def stats(self) -> LoaderStats:
        """Get current loader statistics."""
        return self._stats

    def reset_stats(self) -> None:
        """Reset statistics for a new load operation."""
        self._stats = LoaderStats()

    @abstractmethod
    def load(self, data: object) -> object:
        """Execute the load operation."""
        pass
