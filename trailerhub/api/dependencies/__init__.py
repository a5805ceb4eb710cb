"""FastAPI dependencies."""

from trailerhub.api.dependencies.auth import AdminUser, CurrentUser, get_current_user, require_admin
from trailerhub.api.dependencies.rate_limit import check_rate_limit, get_rate_limiter

__all__ = [
    "CurrentUser",
    "AdminUser",
    "get_current_user",
    "require_admin",
    "check_rate_limit",
    "get_rate_limiter",
]
