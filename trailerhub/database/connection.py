"""Catalog store connection management with SQLAlchemy 2.0.

Provides a cached engine, a session factory, a transactional session
scope, and the FastAPI session dependency.
"""

from collections.abc import Generator
from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.orm import Session, sessionmaker

from trailerhub.database.models import Base
from trailerhub.settings import settings


def build_engine(url: str, **kwargs: object) -> Engine:
    """Create an engine for the given URL.

    SQLite connections get foreign key enforcement so ON DELETE CASCADE
    behaves as it does on PostgreSQL.

    Args:
        url: SQLAlchemy database URL.
        **kwargs: Extra ``create_engine`` arguments.

    Returns:
        Configured Engine.
    """
    engine = create_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, _record) -> None:  # noqa: ANN001
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Get cached SQLAlchemy engine.

    Returns:
        Configured Engine instance with connection pooling.
    """
    db = settings.database
    if not db.is_postgres:
        return build_engine(db.sync_url, pool_pre_ping=True, echo=settings.debug)
    return build_engine(
        db.sync_url,
        pool_size=db.pool_size,
        max_overflow=db.pool_overflow,
        pool_timeout=db.pool_timeout,
        pool_pre_ping=True,
        echo=settings.debug,
    )


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    """Get cached session factory.

    Returns:
        Configured sessionmaker instance.
    """
    return make_session_factory(get_engine())


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Build a session factory bound to an engine.

    Args:
        engine: Engine to bind.

    Returns:
        sessionmaker producing non-autoflushing sessions.
    """
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


@contextmanager
def session_scope(
    factory: sessionmaker[Session] | None = None,
) -> Generator[Session, None, None]:
    """Provide a transactional session scope.

    Commits on success, rolls back on exception, always closes.

    Args:
        factory: Session factory (defaults to the configured one).

    Yields:
        SQLAlchemy Session instance.
    """
    session = (factory or get_session_factory())()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions.

    Yields:
        Database session, committed after a successful request.
    """
    with session_scope() as session:
        yield session


def init_schema(engine: Engine | None = None) -> None:
    """Create all catalog tables that do not exist yet.

    Args:
        engine: Target engine (defaults to the configured one).
    """
    Base.metadata.create_all(engine or get_engine())


def check_connection(engine: Engine | None = None) -> bool:
    """Test database connectivity with a simple query.

    Returns:
        True if connection successful, False otherwise.
    """
    try:
        with (engine or get_engine()).connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception:  # noqa: BLE001
        return False
