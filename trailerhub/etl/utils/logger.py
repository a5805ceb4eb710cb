"""Loggers for the refresh job and the API.

Records go to stdout and, unless LOG_TO_FILE is off, to a dated file
per logger. Every line carries the id of the catalog refresh it belongs
to, or "-" outside a refresh.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import date
from pathlib import Path
from uuid import uuid4

from trailerhub.settings import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | run=%(run_id)s | %(name)s | %(message)s"

_current_run: ContextVar[str] = ContextVar("trailerhub_refresh_run", default="-")
_configured: dict[str, logging.Logger] = {}


class RunContextFilter(logging.Filter):
    """Stamps records with the current refresh run id."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _current_run.get()
        return True


@contextmanager
def bind_run(run_id: str | None = None) -> Iterator[str]:
    """Tag every record logged inside the block with a refresh run id.

    Args:
        run_id: Id to bind; a short random one when omitted.

    Yields:
        The bound id.
    """
    token = _current_run.set(run_id or uuid4().hex[:8])
    try:
        yield _current_run.get()
    finally:
        _current_run.reset(token)


def current_run() -> str:
    return _current_run.get()


def setup_logger(
    name: str,
    level: int | str | None = None,
    log_dir: Path | None = None,
    to_file: bool | None = None,
) -> logging.Logger:
    """Return a configured logger, building it on first use.

    Unset arguments fall back to the logging settings.

    Args:
        name: Logger name, e.g. 'etl.pipeline.populate'.
        level: Level name or number.
        log_dir: Directory of the dated log file.
        to_file: Whether to add the file handler.

    Returns:
        Logger with its own handlers and propagation off.
    """
    if name in _configured:
        return _configured[name]

    cfg = settings.logging
    level = level or cfg.level
    write_file = cfg.to_file if to_file is None else to_file

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if write_file:
        file_handler = _file_handler(name, log_dir or cfg.logs_dir)
        if file_handler is not None:
            handlers.append(file_handler)

    formatter = logging.Formatter(LOG_FORMAT, "%H:%M:%S")
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(RunContextFilter())
        logger.addHandler(handler)

    _configured[name] = logger
    return logger


def log_file_path(name: str, log_dir: Path, day: date | None = None) -> Path:
    """Dated file of a logger, e.g. logs/etl_pipeline_populate_20250501.log."""
    stamp = (day or date.today()).strftime("%Y%m%d")
    return log_dir / f"{name.replace('.', '_')}_{stamp}.log"


def _file_handler(name: str, log_dir: Path) -> logging.FileHandler | None:
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_file_path(name, log_dir), encoding="utf-8")
    except OSError as e:
        print(f"Warning: cannot write logs to {log_dir}: {e}", file=sys.stderr)
        return None
