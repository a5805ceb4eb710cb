"""ETL utilities."""

from trailerhub.etl.utils.logger import bind_run, current_run, setup_logger

__all__ = ["bind_run", "current_run", "setup_logger"]
