"""FastAPI dependency injection for the search service."""

from fastapi import HTTPException, Request, status

from voter_lookup.services.search_service import SearchService


def get_search_service(request: Request) -> SearchService:
    """Return the SearchService created during application startup.

    Raises:
        HTTPException: 503 if the service has not been initialized.
    """
    service: SearchService | None = getattr(request.app.state, "search_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Search service is not initialized.",
        )
    return service
