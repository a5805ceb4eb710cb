"""Single-writer guard for the destructive catalog refresh.

Concurrent refreshes would interleave their delete and insert phases.
The lock is taken without blocking: a second trigger fails fast instead
of queueing behind a run that already replaces the whole catalog.
"""

import logging
import threading
from types import TracebackType

from sqlalchemy import Connection, Engine, text

logger = logging.getLogger(__name__)

_PROCESS_LOCK = threading.Lock()


class CatalogLockHeldError(RuntimeError):
    """Raised when another catalog refresh is in progress."""

    pass


class CatalogRefreshLock:
    """Process-wide lock, plus a PostgreSQL advisory lock when available.

    Example:
        ```python
        with CatalogRefreshLock(engine, key=settings.ingestion.lock_key):
            run_refresh()
        ```
    """

    def __init__(self, engine: Engine | None, key: int) -> None:
        """Initialize the lock.

        Args:
            engine: Engine of the catalog store (advisory lock on PostgreSQL).
            key: Advisory lock key shared by every refresh process.
        """
        self._engine = engine
        self._key = key
        self._connection: Connection | None = None
        self._held = False

    @property
    def held(self) -> bool:
        """Whether this instance currently owns the lock."""
        return self._held

    def acquire(self) -> None:
        """Take the lock or fail immediately.

        Raises:
            CatalogLockHeldError: If another refresh owns the lock.
        """
        if not _PROCESS_LOCK.acquire(blocking=False):
            raise CatalogLockHeldError("A catalog refresh is already running in this process")

        try:
            self._acquire_advisory()
        except BaseException:
            _PROCESS_LOCK.release()
            raise

        self._held = True
        logger.debug("Catalog refresh lock acquired")

    def _acquire_advisory(self) -> None:
        if self._engine is None or self._engine.dialect.name != "postgresql":
            return

        connection = self._engine.connect()
        acquired = connection.execute(
            text("SELECT pg_try_advisory_lock(:key)"),
            {"key": self._key},
        ).scalar()
        if not acquired:
            connection.close()
            raise CatalogLockHeldError("A catalog refresh is already running on another worker")
        self._connection = connection

    def release(self) -> None:
        """Release the lock if held."""
        if not self._held:
            return

        if self._connection is not None:
            try:
                self._connection.execute(
                    text("SELECT pg_advisory_unlock(:key)"),
                    {"key": self._key},
                )
            finally:
                self._connection.close()
                self._connection = None

        self._held = False
        _PROCESS_LOCK.release()
        logger.debug("Catalog refresh lock released")

    def __enter__(self) -> "CatalogRefreshLock":
        """Acquire on context entry."""
        self.acquire()
        return self

    def __exit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        """Release on context exit."""
        self.release()
