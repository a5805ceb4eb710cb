"""TrailerHub: movie trailer catalog with TMDB ingestion and a browsing query engine."""

__version__ = "1.0.0"
