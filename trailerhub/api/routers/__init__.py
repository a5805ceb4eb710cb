"""API routers."""

from trailerhub.api.routers import account, admin, movies, ratings, watchlist

__all__ = ["account", "admin", "movies", "ratings", "watchlist"]
