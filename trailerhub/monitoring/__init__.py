"""Prometheus instrumentation for the API and the ingestion pipeline."""

from trailerhub.monitoring.metrics import (
    CATALOG_SIZE,
    INGESTION_DURATION,
    INGESTION_RUNS_TOTAL,
    PROVIDER_ERRORS_TOTAL,
)
from trailerhub.monitoring.middleware import PrometheusMiddleware, mount_metrics

__all__ = [
    "PrometheusMiddleware",
    "mount_metrics",
    "INGESTION_RUNS_TOTAL",
    "INGESTION_DURATION",
    "PROVIDER_ERRORS_TOTAL",
    "CATALOG_SIZE",
]
