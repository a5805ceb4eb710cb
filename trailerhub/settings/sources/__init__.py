"""External data source settings."""

from trailerhub.settings.sources.tmdb import TMDBSettings

__all__ = ["TMDBSettings"]
