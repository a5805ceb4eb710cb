"""Operator endpoints for REST API.

The catalog refresh replaces every movie and drops all user library
rows that reference them, so it is limited to ADMIN_USERS.
"""

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from trailerhub.api.dependencies.auth import AdminUser
from trailerhub.api.schemas import PopulateResponse
from trailerhub.etl.pipeline import IngestionReport, populate_catalog
from trailerhub.etl.utils import setup_logger

logger = setup_logger("api.admin")

router = APIRouter(prefix="/admin", tags=["Admin"])

CatalogRefresh = Callable[[], IngestionReport]


def get_catalog_refresh() -> CatalogRefresh:
    """Provide the refresh routine (overridden in tests)."""
    return populate_catalog


@router.post(
    "/populate-movies",
    response_model=PopulateResponse,
    summary="Refresh the catalog",
    description="Replace the catalog with the current top of TMDB.",
    responses={
        status.HTTP_409_CONFLICT: {"description": "A refresh is already running"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "The refresh failed"},
    },
)
def populate_movies(
    user: AdminUser,
    refresh: Annotated[CatalogRefresh, Depends(get_catalog_refresh)],
) -> PopulateResponse | JSONResponse:
    """Run a full catalog refresh synchronously.

    Returns:
        Counts of written movies and credits, or an error body.
    """
    logger.info(f"Catalog refresh requested by {user.sub}")
    report = refresh()

    if report.success:
        return PopulateResponse(**report.to_response())

    code = (
        status.HTTP_409_CONFLICT
        if report.already_running
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse(status_code=code, content=report.to_response())
