"""Prometheus metrics of the catalog ingestion pipeline."""

from prometheus_client import Counter, Gauge, Histogram

INGESTION_RUNS_TOTAL = Counter(
    "trailerhub_ingestion_runs_total",
    "Catalog refresh runs by outcome",
    ["outcome"],
)

INGESTION_DURATION = Histogram(
    "trailerhub_ingestion_duration_seconds",
    "Catalog refresh duration in seconds",
    buckets=[30, 60, 120, 300, 600, 900, 1800, 3600],
)

PROVIDER_ERRORS_TOTAL = Counter(
    "trailerhub_provider_errors_total",
    "Provider calls that failed and were skipped",
    ["stage"],
)

CATALOG_SIZE = Gauge(
    "trailerhub_catalog_movies",
    "Movies written by the last successful refresh",
)
